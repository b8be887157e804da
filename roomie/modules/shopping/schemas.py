from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from roomie.household.types import ShoppingItem


class ShoppingItemCreate(BaseModel):
    item: str = Field(min_length=1)
    added_by: Optional[str] = None  # defaults to the caller's roommate


class ShoppingItemResponse(ShoppingItem):
    created_at: Optional[datetime] = None
