from fastapi import APIRouter, Depends, HTTPException
from roomie.database.supabase_client import get_supabase
from roomie.modules.bills.schemas import BillCreate, BillResponse
from roomie.modules.bills.service import BillService
from roomie.core.dependencies import get_current_user
from supabase import Client
from typing import List, Dict
from datetime import date

router = APIRouter(prefix="/bills", tags=["bills"])


def get_bill_service(supabase: Client = Depends(get_supabase)) -> BillService:
    return BillService(supabase)


@router.get("", response_model=List[BillResponse])
async def list_bills(
    user_data: Dict = Depends(get_current_user),
    service: BillService = Depends(get_bill_service)
):
    """List bills, most recent first"""
    return service.list_bills()


@router.post("", response_model=BillResponse, status_code=201)
async def create_bill(
    bill_data: BillCreate,
    user_data: Dict = Depends(get_current_user),
    service: BillService = Depends(get_bill_service)
):
    """Record a new bill (date defaults to today)"""
    return service.create_bill(bill_data, today=date.today())


@router.get("/{bill_id}", response_model=BillResponse)
async def get_bill(
    bill_id: str,
    user_data: Dict = Depends(get_current_user),
    service: BillService = Depends(get_bill_service)
):
    """Get bill by ID"""
    return service.get_bill_by_id(bill_id)


@router.post("/{bill_id}/settle", response_model=BillResponse)
async def settle_bill(
    bill_id: str,
    user_data: Dict = Depends(get_current_user),
    service: BillService = Depends(get_bill_service)
):
    """Mark a bill as settled"""
    return service.settle_bill(bill_id)


@router.delete("/{bill_id}", status_code=204)
async def delete_bill(
    bill_id: str,
    user_data: Dict = Depends(get_current_user),
    service: BillService = Depends(get_bill_service)
):
    """Delete bill"""
    if not service.delete_bill(bill_id):
        raise HTTPException(status_code=404, detail="Bill not found")
    return None
