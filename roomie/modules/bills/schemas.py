from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import datetime as dt
from decimal import Decimal

from roomie.household.types import Bill


class BillCreate(BaseModel):
    title: str = Field(min_length=1)
    amount: Decimal = Field(ge=0, decimal_places=2)
    category: Optional[str] = None
    paid_by: str
    split_between: List[str] = Field(min_length=1)
    date: Optional[dt.date] = None  # defaults to the day the bill is recorded

    @field_validator("split_between")
    @classmethod
    def distinct_participants(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("split_between must not repeat a roommate")
        return v


class BillResponse(Bill):
    created_at: Optional[dt.datetime] = None
