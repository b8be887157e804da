from fastapi import APIRouter, BackgroundTasks, Depends
from roomie.database.supabase_client import get_supabase, get_service_supabase
from roomie.modules.roommates.schemas import RoommateCreate, RoommateGroupAssign, RoommateResponse
from roomie.modules.roommates.service import RoommateService
from roomie.household.types import RoommateStatus
from roomie.notifications.email_worker import send_roommate_invitation_async
from roomie.core.dependencies import get_current_user
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/roommates", tags=["roommates"])


def get_roommate_service(
    supabase: Client = Depends(get_supabase),
    admin: Client = Depends(get_service_supabase)
) -> RoommateService:
    return RoommateService(supabase, admin=admin)


@router.get("", response_model=List[RoommateResponse])
async def list_roommates(
    user_data: Dict = Depends(get_current_user),
    service: RoommateService = Depends(get_roommate_service)
):
    """List all roommates in the household"""
    return service.list_roommates()


@router.post("", response_model=RoommateResponse, status_code=201)
async def add_roommate(
    roommate_data: RoommateCreate,
    background_tasks: BackgroundTasks,
    user_data: Dict = Depends(get_current_user),
    service: RoommateService = Depends(get_roommate_service),
    supabase: Client = Depends(get_supabase)
):
    """Add a roommate and email them an invitation in the background"""
    roommate = service.add_roommate(roommate_data, user_data["id"])
    background_tasks.add_task(
        send_roommate_invitation_async,
        invited_by=user_data["display_name"],
        roommate_name=roommate.name,
        roommate_email=roommate.email,
        is_new_user=roommate.status != RoommateStatus.REGISTERED,
        supabase=supabase,
    )
    return roommate


@router.get("/{roommate_id}", response_model=RoommateResponse)
async def get_roommate(
    roommate_id: str,
    user_data: Dict = Depends(get_current_user),
    service: RoommateService = Depends(get_roommate_service)
):
    """Get roommate by ID"""
    return service.get_roommate_by_id(roommate_id)


@router.put("/{roommate_id}/group", response_model=RoommateResponse)
async def assign_group(
    roommate_id: str,
    assignment: RoommateGroupAssign,
    user_data: Dict = Depends(get_current_user),
    service: RoommateService = Depends(get_roommate_service)
):
    """Move a roommate into a group (group_id null to remove them from it)"""
    return service.assign_group(roommate_id, assignment.group_id)


@router.delete("/{roommate_id}", status_code=204)
async def remove_roommate(
    roommate_id: str,
    user_data: Dict = Depends(get_current_user),
    service: RoommateService = Depends(get_roommate_service)
):
    """Remove a roommate along with their bills and chores"""
    service.get_roommate_by_id(roommate_id)
    service.remove_roommate(roommate_id)
    return None
