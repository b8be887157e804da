from supabase import Client
from roomie.modules.chores.schemas import ChoreCreate, ChoreResponse
from typing import List
from datetime import date
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class ChoreService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_chores(self) -> List[ChoreResponse]:
        """List chores, soonest due first"""
        try:
            result = self.supabase.table("chores")\
                .select("*")\
                .order("due_date")\
                .execute()
            return [ChoreResponse(**chore) for chore in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_chore_by_id(self, chore_id: str) -> ChoreResponse:
        """Get chore by ID"""
        try:
            result = self.supabase.table("chores")\
                .select("*")\
                .eq("id", chore_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Chore not found")

            return ChoreResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_chore(self, chore_data: ChoreCreate) -> ChoreResponse:
        """Assign a new chore to a roommate"""
        try:
            assignee_result = self.supabase.table("roommates")\
                .select("id")\
                .eq("id", chore_data.assigned_to)\
                .execute()
            if not assignee_result.data:
                raise HTTPException(status_code=400, detail=f"Unknown roommate: {chore_data.assigned_to}")

            result = self.supabase.table("chores").insert({
                "title": chore_data.title,
                "description": chore_data.description,
                "assigned_to": chore_data.assigned_to,
                "due_date": chore_data.due_date.isoformat(),
                "completed": False,
                "completed_date": None,
                "priority": chore_data.priority.value
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create chore")

            chore = ChoreResponse(**result.data[0])
            logger.info(f"Chore created: {chore.id} '{chore.title}' due {chore.due_date}")
            return chore
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def toggle_chore(self, chore_id: str, today: date) -> ChoreResponse:
        """Flip completion; completing stamps today's date, reopening clears it"""
        chore = self.get_chore_by_id(chore_id)
        completed = not chore.completed
        try:
            result = self.supabase.table("chores")\
                .update({
                    "completed": completed,
                    "completed_date": today.isoformat() if completed else None
                })\
                .eq("id", chore_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Chore not found")

            logger.info(f"Chore {chore_id} marked {'done' if completed else 'not done'}")
            return ChoreResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_chore(self, chore_id: str) -> bool:
        """Delete chore"""
        try:
            result = self.supabase.table("chores")\
                .delete()\
                .eq("id", chore_id)\
                .execute()

            return len(result.data) > 0
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
