from supabase import Client
from roomie.modules.bills.schemas import BillCreate, BillResponse
from typing import List
from datetime import date
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class BillService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_bills(self) -> List[BillResponse]:
        """List bills, most recent first"""
        try:
            result = self.supabase.table("bills")\
                .select("*")\
                .order("date", desc=True)\
                .order("created_at", desc=True)\
                .execute()
            return [BillResponse(**bill) for bill in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_bill_by_id(self, bill_id: str) -> BillResponse:
        """Get bill by ID"""
        try:
            result = self.supabase.table("bills")\
                .select("*")\
                .eq("id", bill_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Bill not found")

            return BillResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_bill(self, bill_data: BillCreate, today: date) -> BillResponse:
        """Record a bill paid by one roommate and split equally between others"""
        try:
            roommate_ids = set(bill_data.split_between)
            roommate_ids.add(bill_data.paid_by)
            known_result = self.supabase.table("roommates")\
                .select("id")\
                .in_("id", list(roommate_ids))\
                .execute()
            known = {r["id"] for r in known_result.data}
            missing = roommate_ids - known
            if missing:
                raise HTTPException(
                    status_code=400,
                    detail=f"Unknown roommate(s): {', '.join(sorted(missing))}"
                )

            result = self.supabase.table("bills").insert({
                "title": bill_data.title,
                "amount": str(bill_data.amount),
                "category": bill_data.category or "Other",
                "paid_by": bill_data.paid_by,
                "split_between": bill_data.split_between,
                "date": (bill_data.date or today).isoformat(),
                "settled": False
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create bill")

            bill = BillResponse(**result.data[0])
            logger.info(f"Bill created: {bill.id} '{bill.title}' {bill.amount} split {len(bill.split_between)} ways")
            return bill
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def settle_bill(self, bill_id: str) -> BillResponse:
        """Mark a bill settled; it stops counting towards balances"""
        try:
            result = self.supabase.table("bills")\
                .update({"settled": True})\
                .eq("id", bill_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Bill not found")

            logger.info(f"Bill settled: {bill_id}")
            return BillResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_bill(self, bill_id: str) -> bool:
        """Delete bill"""
        try:
            result = self.supabase.table("bills")\
                .delete()\
                .eq("id", bill_id)\
                .execute()

            return len(result.data) > 0
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
