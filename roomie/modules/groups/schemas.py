from pydantic import BaseModel, Field
from typing import List

from roomie.household.types import Group
from roomie.modules.roommates.schemas import RoommateResponse


class GroupCreate(BaseModel):
    name: str = Field(min_length=1)


class GroupResponse(Group):
    pass


class GroupWithMembersResponse(GroupResponse):
    members: List[RoommateResponse]
