from fastapi import APIRouter, Depends
from roomie.database.supabase_client import get_supabase
from roomie.modules.groups.schemas import GroupCreate, GroupResponse, GroupWithMembersResponse
from roomie.modules.groups.service import GroupService
from roomie.core.dependencies import get_current_user
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/groups", tags=["groups"])


def get_group_service(supabase: Client = Depends(get_supabase)) -> GroupService:
    return GroupService(supabase)


@router.post("", response_model=GroupResponse, status_code=201)
async def create_group(
    group_data: GroupCreate,
    user_data: Dict = Depends(get_current_user),
    service: GroupService = Depends(get_group_service)
):
    """Create a new group"""
    return service.create_group(group_data, user_data["id"])


@router.get("", response_model=List[GroupResponse])
async def list_groups(
    user_data: Dict = Depends(get_current_user),
    service: GroupService = Depends(get_group_service)
):
    """List all groups"""
    return service.list_groups()


@router.get("/{group_id}", response_model=GroupWithMembersResponse)
async def get_group(
    group_id: str,
    user_data: Dict = Depends(get_current_user),
    service: GroupService = Depends(get_group_service)
):
    """Get group with its members"""
    return service.get_group_with_members(group_id)


@router.delete("/{group_id}", status_code=204)
async def delete_group(
    group_id: str,
    user_data: Dict = Depends(get_current_user),
    service: GroupService = Depends(get_group_service)
):
    """Delete group (members are kept, only their group is cleared)"""
    service.get_group_by_id(group_id)
    service.delete_group(group_id)
    return None
