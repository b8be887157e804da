from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from roomie.household.types import Announcement


def _scope(v: Optional[str]) -> Optional[str]:
    # "all" is what the client sends for the whole household
    if not v or v == "all":
        return None
    return v


class AnnouncementCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    group_id: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("group_id")
    @classmethod
    def household_scope(cls, v: Optional[str]) -> Optional[str]:
        return _scope(v)


class AnnouncementUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    group_id: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("group_id")
    @classmethod
    def household_scope(cls, v: Optional[str]) -> Optional[str]:
        return _scope(v)


class AnnouncementResponse(Announcement):
    pass


class AnnouncementView(AnnouncementResponse):
    group_name: str
    author_name: str
    expiry_label: Optional[str] = None
