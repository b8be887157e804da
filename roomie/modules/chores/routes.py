from fastapi import APIRouter, Depends, HTTPException
from roomie.database.supabase_client import get_supabase
from roomie.modules.chores.schemas import ChoreCreate, ChoreResponse
from roomie.modules.chores.service import ChoreService
from roomie.core.dependencies import get_current_user
from supabase import Client
from typing import List, Dict
from datetime import date

router = APIRouter(prefix="/chores", tags=["chores"])


def get_chore_service(supabase: Client = Depends(get_supabase)) -> ChoreService:
    return ChoreService(supabase)


@router.get("", response_model=List[ChoreResponse])
async def list_chores(
    user_data: Dict = Depends(get_current_user),
    service: ChoreService = Depends(get_chore_service)
):
    """List chores, soonest due first"""
    return service.list_chores()


@router.post("", response_model=ChoreResponse, status_code=201)
async def create_chore(
    chore_data: ChoreCreate,
    user_data: Dict = Depends(get_current_user),
    service: ChoreService = Depends(get_chore_service)
):
    """Create a chore for a roommate"""
    return service.create_chore(chore_data)


@router.get("/{chore_id}", response_model=ChoreResponse)
async def get_chore(
    chore_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ChoreService = Depends(get_chore_service)
):
    """Get chore by ID"""
    return service.get_chore_by_id(chore_id)


@router.post("/{chore_id}/toggle", response_model=ChoreResponse)
async def toggle_chore(
    chore_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ChoreService = Depends(get_chore_service)
):
    """Mark a chore done, or reopen a completed one"""
    return service.toggle_chore(chore_id, today=date.today())


@router.delete("/{chore_id}", status_code=204)
async def delete_chore(
    chore_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ChoreService = Depends(get_chore_service)
):
    """Delete chore"""
    if not service.delete_chore(chore_id):
        raise HTTPException(status_code=404, detail="Chore not found")
    return None
