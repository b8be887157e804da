from supabase import Client
from roomie.modules.shopping.schemas import ShoppingItemCreate, ShoppingItemResponse
from typing import List
from datetime import date
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class ShoppingService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_items(self) -> List[ShoppingItemResponse]:
        """List shopping items, oldest first"""
        try:
            result = self.supabase.table("shopping_items")\
                .select("*")\
                .order("created_at")\
                .execute()
            return [ShoppingItemResponse(**item) for item in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_item_by_id(self, item_id: str) -> ShoppingItemResponse:
        """Get shopping item by ID"""
        try:
            result = self.supabase.table("shopping_items")\
                .select("*")\
                .eq("id", item_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Shopping item not found")

            return ShoppingItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def add_item(self, item_data: ShoppingItemCreate, added_by: str, today: date) -> ShoppingItemResponse:
        """Put an item on the shopping list"""
        try:
            if item_data.added_by:
                known_result = self.supabase.table("roommates")\
                    .select("id")\
                    .eq("id", item_data.added_by)\
                    .execute()
                if not known_result.data:
                    raise HTTPException(status_code=400, detail=f"Unknown roommate: {item_data.added_by}")

            result = self.supabase.table("shopping_items").insert({
                "item": item_data.item,
                "added_by": item_data.added_by or added_by,
                "date_added": today.isoformat(),
                "purchased": False
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add item")

            item = ShoppingItemResponse(**result.data[0])
            logger.info(f"Shopping item added: {item.id} '{item.item}'")
            return item
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def mark_purchased(self, item_id: str, purchased_by: str, today: date) -> ShoppingItemResponse:
        """Record who bought an item and when. An item already bought keeps its first buyer."""
        item = self.get_item_by_id(item_id)
        if item.purchased:
            return item
        try:
            result = self.supabase.table("shopping_items")\
                .update({
                    "purchased": True,
                    "purchased_by": purchased_by,
                    "purchased_date": today.isoformat()
                })\
                .eq("id", item_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Shopping item not found")

            return ShoppingItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def remove_item(self, item_id: str) -> bool:
        """Remove an item from the list"""
        try:
            result = self.supabase.table("shopping_items")\
                .delete()\
                .eq("id", item_id)\
                .execute()

            return len(result.data) > 0
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
