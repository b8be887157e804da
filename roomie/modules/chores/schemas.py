from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from roomie.household.types import Chore, Priority


class ChoreCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    assigned_to: str
    due_date: date
    priority: Priority = Priority.MEDIUM


class ChoreResponse(Chore):
    created_at: Optional[datetime] = None
