from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from roomie.database.supabase_client import get_supabase
from roomie.modules.announcements.schemas import (
    AnnouncementCreate, AnnouncementUpdate, AnnouncementResponse, AnnouncementView
)
from roomie.modules.announcements.service import AnnouncementService, build_views
from roomie.modules.groups.service import GroupService
from roomie.modules.roommates.service import RoommateService
from roomie.notifications.email_worker import send_announcement_email_async
from roomie.core.dependencies import get_current_user, get_current_roommate
from supabase import Client
from typing import Any, List, Dict, Optional
from datetime import datetime, timezone

router = APIRouter(prefix="/announcements", tags=["announcements"])


def get_announcement_service(supabase: Client = Depends(get_supabase)) -> AnnouncementService:
    return AnnouncementService(supabase)


@router.get("", response_model=List[AnnouncementView])
async def list_announcements(
    user_data: Dict = Depends(get_current_user),
    roommate: Optional[Dict[str, Any]] = Depends(get_current_roommate),
    service: AnnouncementService = Depends(get_announcement_service),
    supabase: Client = Depends(get_supabase)
):
    """List active announcements the caller can see"""
    now = datetime.now(timezone.utc)
    # Callers without a roommate record see everything
    group_ids = None
    if roommate is not None:
        group_ids = [roommate["group_id"]] if roommate.get("group_id") else []

    announcements = service.list_announcements(now, user_data["id"], group_ids)
    roommates = RoommateService(supabase).list_roommates()
    groups = GroupService(supabase).list_groups()
    return build_views(announcements, roommates, groups, now)


@router.post("", response_model=AnnouncementResponse, status_code=201)
async def create_announcement(
    announcement_data: AnnouncementCreate,
    background_tasks: BackgroundTasks,
    user_data: Dict = Depends(get_current_user),
    service: AnnouncementService = Depends(get_announcement_service),
    supabase: Client = Depends(get_supabase)
):
    """Post an announcement and email its audience in the background"""
    announcement = service.create_announcement(announcement_data, user_data["id"])
    background_tasks.add_task(
        send_announcement_email_async,
        title=announcement.title,
        content=announcement.content,
        group_id=announcement.group_id,
        created_by=user_data["display_name"],
        supabase=supabase,
    )
    return announcement


@router.get("/{announcement_id}", response_model=AnnouncementResponse)
async def get_announcement(
    announcement_id: str,
    user_data: Dict = Depends(get_current_user),
    service: AnnouncementService = Depends(get_announcement_service)
):
    """Get announcement by ID"""
    return service.get_announcement_by_id(announcement_id)


@router.put("/{announcement_id}", response_model=AnnouncementResponse)
async def update_announcement(
    announcement_id: str,
    announcement_data: AnnouncementUpdate,
    user_data: Dict = Depends(get_current_user),
    service: AnnouncementService = Depends(get_announcement_service)
):
    """Edit an announcement (author only)"""
    return service.update_announcement(announcement_id, announcement_data, user_data["id"])


@router.delete("/{announcement_id}", status_code=204)
async def delete_announcement(
    announcement_id: str,
    user_data: Dict = Depends(get_current_user),
    service: AnnouncementService = Depends(get_announcement_service)
):
    """Delete an announcement (author only)"""
    if not service.delete_announcement(announcement_id, user_data["id"]):
        raise HTTPException(status_code=404, detail="Announcement not found")
    return None
