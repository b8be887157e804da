from fastapi import APIRouter, Depends, HTTPException
from roomie.database.supabase_client import get_supabase
from roomie.modules.shopping.schemas import ShoppingItemCreate, ShoppingItemResponse
from roomie.modules.shopping.service import ShoppingService
from roomie.core.dependencies import get_current_user, get_acting_roommate_id
from supabase import Client
from typing import List, Dict
from datetime import date

router = APIRouter(prefix="/shopping-items", tags=["shopping"])


def get_shopping_service(supabase: Client = Depends(get_supabase)) -> ShoppingService:
    return ShoppingService(supabase)


@router.get("", response_model=List[ShoppingItemResponse])
async def list_items(
    user_data: Dict = Depends(get_current_user),
    service: ShoppingService = Depends(get_shopping_service)
):
    """List the shopping list"""
    return service.list_items()


@router.post("", response_model=ShoppingItemResponse, status_code=201)
async def add_item(
    item_data: ShoppingItemCreate,
    roommate_id: str = Depends(get_acting_roommate_id),
    service: ShoppingService = Depends(get_shopping_service)
):
    """Add an item to the shopping list"""
    return service.add_item(item_data, added_by=roommate_id, today=date.today())


@router.post("/{item_id}/purchase", response_model=ShoppingItemResponse)
async def mark_purchased(
    item_id: str,
    roommate_id: str = Depends(get_acting_roommate_id),
    service: ShoppingService = Depends(get_shopping_service)
):
    """Mark an item as bought by the caller's roommate"""
    return service.mark_purchased(item_id, purchased_by=roommate_id, today=date.today())


@router.delete("/{item_id}", status_code=204)
async def remove_item(
    item_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ShoppingService = Depends(get_shopping_service)
):
    """Remove an item from the shopping list"""
    if not service.remove_item(item_id):
        raise HTTPException(status_code=404, detail="Shopping item not found")
    return None
