from supabase import Client
from roomie.config.settings import settings
from roomie.household.lookups import DEFAULT_COLOR
from roomie.household.types import RoommateStatus
from roomie.modules.roommates.schemas import RoommateCreate, RoommateResponse
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
AUTH_USERS_PER_PAGE = 100


def is_unique_violation(exc: Exception) -> bool:
    return getattr(exc, "code", None) == UNIQUE_VIOLATION or UNIQUE_VIOLATION in str(exc)


class RoommateService:
    def __init__(self, supabase: Client, admin: Optional[Client] = None):
        self.supabase = supabase
        self.admin = admin

    def list_roommates(self) -> List[RoommateResponse]:
        """List all roommates, oldest first"""
        try:
            result = self.supabase.table("roommates")\
                .select("*")\
                .order("created_at")\
                .execute()
            return [RoommateResponse(**roommate) for roommate in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_roommate_by_id(self, roommate_id: str) -> RoommateResponse:
        """Get roommate by ID"""
        try:
            result = self.supabase.table("roommates")\
                .select("*")\
                .eq("id", roommate_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Roommate not found")

            return RoommateResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def find_auth_user_id(self, email: str) -> Optional[str]:
        """Auth account id registered with this email. Needs the service-role client; None when unknown.

        The admin API returns one page per call, so pages are walked until a short one comes back.
        """
        if self.admin is None:
            return None
        wanted = email.lower()
        page = 1
        try:
            while True:
                users = self.admin.auth.admin.list_users(page=page, per_page=AUTH_USERS_PER_PAGE)
                for user in users:
                    if user.email and user.email.lower() == wanted:
                        return user.id
                if len(users) < AUTH_USERS_PER_PAGE:
                    return None
                page += 1
        except Exception as e:
            logger.warning(f"Could not look up auth account for {email}: {e}")
        return None

    def add_roommate(self, roommate_data: RoommateCreate, invited_by: str) -> RoommateResponse:
        """Invite a roommate. Registered when an account with that email already exists."""
        try:
            existing_user_id = self.find_auth_user_id(roommate_data.email)
            colors = settings.get_roommate_colors_list()
            count = len(self.list_roommates())

            result = self.supabase.table("roommates").insert({
                "name": roommate_data.name,
                "email": roommate_data.email,
                "color": colors[count % len(colors)] if colors else DEFAULT_COLOR,
                "status": (RoommateStatus.REGISTERED if existing_user_id else RoommateStatus.INVITED).value,
                "invited_by": invited_by,
                "user_id": existing_user_id,
                "group_id": roommate_data.group_id,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add roommate")

            roommate = RoommateResponse(**result.data[0])
            logger.info(f"Roommate added: {roommate.id} ({roommate.status.value})")
            return roommate
        except HTTPException:
            raise
        except Exception as e:
            if is_unique_violation(e):
                raise HTTPException(status_code=409, detail="This person is already a roommate")
            raise HTTPException(status_code=500, detail=str(e))

    def assign_group(self, roommate_id: str, group_id: Optional[str]) -> RoommateResponse:
        """Move a roommate into a group, or out of any group"""
        try:
            if group_id is not None:
                group_result = self.supabase.table("groups")\
                    .select("id")\
                    .eq("id", group_id)\
                    .execute()
                if not group_result.data:
                    raise HTTPException(status_code=404, detail="Group not found")

            result = self.supabase.table("roommates")\
                .update({"group_id": group_id})\
                .eq("id", roommate_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Roommate not found")

            return RoommateResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def remove_roommate(self, roommate_id: str) -> bool:
        """Remove a roommate together with the bills and chores that reference them"""
        try:
            # Bills they paid or share, then their chores
            self.supabase.table("bills")\
                .delete()\
                .eq("paid_by", roommate_id)\
                .execute()
            self.supabase.table("bills")\
                .delete()\
                .contains("split_between", [roommate_id])\
                .execute()
            self.supabase.table("chores")\
                .delete()\
                .eq("assigned_to", roommate_id)\
                .execute()

            result = self.supabase.table("roommates")\
                .delete()\
                .eq("id", roommate_id)\
                .execute()

            removed = len(result.data) > 0
            if removed:
                logger.info(f"Roommate removed: {roommate_id}")
            return removed
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
