"""
Household domain records.

Snapshots of the rows stored in Supabase, validated once when they are built.
Every model is frozen: the balance, status and reminder functions read them and
return new values, they never write back.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RoommateStatus(str, Enum):
    INVITED = "invited"
    REGISTERED = "registered"


class ReminderKind(str, Enum):
    BILL = "bill"
    CHORE = "chore"


def as_utc(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Read naive timestamps as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Roommate(Snapshot):
    id: str
    name: str
    email: str
    color: str = ""
    user_id: Optional[str] = None
    status: Optional[RoommateStatus] = None
    invited_by: Optional[str] = None
    group_id: Optional[str] = None


class Group(Snapshot):
    id: str
    name: str
    created_by: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class Bill(Snapshot):
    id: str
    title: str
    amount: Decimal = Field(ge=0)
    category: str = "Other"
    paid_by: str
    split_between: List[str] = Field(min_length=1)
    date: dt.date
    settled: bool = False

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Optional[str]) -> str:
        return v or "Other"

    @field_validator("split_between")
    @classmethod
    def distinct_participants(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("split_between must not repeat a roommate")
        return v


class Chore(Snapshot):
    id: str
    title: str
    description: str = ""
    assigned_to: str
    due_date: dt.date
    completed: bool = False
    completed_date: Optional[dt.date] = None
    priority: Priority = Priority.MEDIUM

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v: Optional[str]) -> str:
        return v or ""

    @model_validator(mode="after")
    def completion_date_matches_flag(self):
        if self.completed and self.completed_date is None:
            raise ValueError("completed chore needs a completed_date")
        if not self.completed and self.completed_date is not None:
            raise ValueError("completed_date set on a chore that is not completed")
        return self


class ShoppingItem(Snapshot):
    id: str
    item: str
    added_by: str
    date_added: dt.date
    purchased: bool = False
    purchased_by: Optional[str] = None
    purchased_date: Optional[dt.date] = None

    @model_validator(mode="after")
    def purchase_fields_match_flag(self):
        has_purchase = self.purchased_by is not None and self.purchased_date is not None
        has_any = self.purchased_by is not None or self.purchased_date is not None
        if self.purchased and not has_purchase:
            raise ValueError("purchased item needs purchased_by and purchased_date")
        if not self.purchased and has_any:
            raise ValueError("purchase details set on an item that is not purchased")
        return self


class Announcement(Snapshot):
    id: str
    title: str
    content: str
    created_by: str
    group_id: Optional[str] = None
    due_date: Optional[dt.datetime] = None  # expiry; hidden once it has passed
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def aware(cls, v: Optional[dt.datetime]) -> Optional[dt.datetime]:
        return as_utc(v)


class Reminder(Snapshot):
    kind: ReminderKind
    message: str
    roommate_id: str
    priority: Priority


class ChoreProgress(Snapshot):
    roommate_id: str
    completed: int
    total: int
    percent: float


class HouseholdStats(Snapshot):
    total_bills: int
    completed_chores: int
    pending_chores: int
    overdue_chores: int
