from supabase import Client
from roomie.modules.groups.schemas import GroupCreate, GroupResponse, GroupWithMembersResponse
from roomie.modules.roommates.schemas import RoommateResponse
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_group(self, group_data: GroupCreate, user_id: str) -> GroupResponse:
        """Create a new group"""
        try:
            result = self.supabase.table("groups").insert({
                "name": group_data.name,
                "created_by": user_id
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create group")

            group = GroupResponse(**result.data[0])
            logger.info(f"Group created: {group.id} '{group.name}'")
            return group
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_group_by_id(self, group_id: str) -> GroupResponse:
        """Get group by ID"""
        try:
            result = self.supabase.table("groups")\
                .select("*")\
                .eq("id", group_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Group not found")

            return GroupResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_groups(self) -> List[GroupResponse]:
        """List all groups, oldest first"""
        try:
            result = self.supabase.table("groups")\
                .select("*")\
                .order("created_at")\
                .execute()
            return [GroupResponse(**group) for group in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_group_with_members(self, group_id: str) -> GroupWithMembersResponse:
        """Get group with the roommates that belong to it"""
        group = self.get_group_by_id(group_id)
        try:
            members_result = self.supabase.table("roommates")\
                .select("*")\
                .eq("group_id", group_id)\
                .order("created_at")\
                .execute()
            members = [RoommateResponse(**member) for member in members_result.data]
            return GroupWithMembersResponse(**group.model_dump(), members=members)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_group(self, group_id: str) -> bool:
        """Delete group; its members stay as roommates without a group"""
        try:
            self.supabase.table("roommates")\
                .update({"group_id": None})\
                .eq("group_id", group_id)\
                .execute()

            result = self.supabase.table("groups")\
                .delete()\
                .eq("id", group_id)\
                .execute()

            deleted = len(result.data) > 0
            if deleted:
                logger.info(f"Group deleted: {group_id}")
            return deleted
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
