from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

from roomie.household.types import Roommate


class RoommateCreate(BaseModel):
    name: str
    email: EmailStr
    group_id: Optional[str] = None


class RoommateGroupAssign(BaseModel):
    group_id: Optional[str] = None  # None removes the roommate from its group


class RoommateResponse(Roommate):
    created_at: Optional[datetime] = None
