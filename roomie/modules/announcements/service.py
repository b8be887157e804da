from supabase import Client
from roomie.household.announcements import active_announcements, expiry_label, is_visible_to
from roomie.household.lookups import resolve_group_name, resolve_user_name
from roomie.household.types import Group, Roommate
from roomie.modules.announcements.schemas import (
    AnnouncementCreate, AnnouncementUpdate, AnnouncementResponse, AnnouncementView
)
from typing import List, Optional
from datetime import datetime, timezone
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_announcements(
        self,
        now: datetime,
        user_id: str,
        group_ids: Optional[List[str]] = None
    ) -> List[AnnouncementResponse]:
        """Active announcements, newest first. With group_ids, only those the caller can see (plus their own)."""
        try:
            result = self.supabase.table("announcements")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            announcements = [AnnouncementResponse(**a) for a in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        announcements = active_announcements(announcements, now)
        if group_ids is not None:
            announcements = [
                a for a in announcements
                if a.created_by == user_id or is_visible_to(a, group_ids)
            ]
        return announcements

    def get_announcement_by_id(self, announcement_id: str) -> AnnouncementResponse:
        """Get announcement by ID"""
        try:
            result = self.supabase.table("announcements")\
                .select("*")\
                .eq("id", announcement_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Announcement not found")

            return AnnouncementResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_announcement(self, announcement_data: AnnouncementCreate, user_id: str) -> AnnouncementResponse:
        """Post an announcement to the household or to one group"""
        try:
            result = self.supabase.table("announcements").insert({
                "title": announcement_data.title,
                "content": announcement_data.content,
                "created_by": user_id,
                "group_id": announcement_data.group_id,
                "due_date": announcement_data.due_date.isoformat() if announcement_data.due_date else None
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create announcement")

            announcement = AnnouncementResponse(**result.data[0])
            logger.info(f"Announcement created: {announcement.id} '{announcement.title}'")
            return announcement
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_announcement(
        self,
        announcement_id: str,
        announcement_data: AnnouncementUpdate,
        user_id: str
    ) -> AnnouncementResponse:
        """Update an announcement (author only). Only fields present in the request change."""
        existing = self.get_announcement_by_id(announcement_id)
        if existing.created_by != user_id:
            raise HTTPException(status_code=403, detail="Only the author can edit this announcement")

        update_data = {}
        fields = announcement_data.model_fields_set
        if "title" in fields and announcement_data.title is not None:
            update_data["title"] = announcement_data.title
        if "content" in fields and announcement_data.content is not None:
            update_data["content"] = announcement_data.content
        if "group_id" in fields:
            update_data["group_id"] = announcement_data.group_id
        if "due_date" in fields:
            due_date = announcement_data.due_date
            update_data["due_date"] = due_date.isoformat() if due_date else None

        if not update_data:
            # No changes, return existing
            return existing

        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            result = self.supabase.table("announcements")\
                .update(update_data)\
                .eq("id", announcement_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Announcement not found")

            return AnnouncementResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_announcement(self, announcement_id: str, user_id: str) -> bool:
        """Delete an announcement (author only)"""
        existing = self.get_announcement_by_id(announcement_id)
        if existing.created_by != user_id:
            raise HTTPException(status_code=403, detail="Only the author can delete this announcement")
        try:
            result = self.supabase.table("announcements")\
                .delete()\
                .eq("id", announcement_id)\
                .execute()

            return len(result.data) > 0
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))


def build_views(
    announcements: List[AnnouncementResponse],
    roommates: List[Roommate],
    groups: List[Group],
    now: datetime
) -> List[AnnouncementView]:
    """Attach group name, author name and expiry label for display"""
    return [
        AnnouncementView(
            **a.model_dump(),
            group_name=resolve_group_name(groups, a.group_id),
            author_name=resolve_user_name(roommates, a.created_by),
            expiry_label=expiry_label(a, now),
        )
        for a in announcements
    ]
