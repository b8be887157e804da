from fastapi import APIRouter, Depends, Query
from roomie.database.supabase_client import get_supabase
from roomie.household.types import HouseholdStats, Reminder
from roomie.modules.dashboard.schemas import DashboardResponse, RoommateBalance
from roomie.modules.dashboard.service import DashboardService
from roomie.core.dependencies import get_current_user
from supabase import Client
from typing import List, Dict, Optional
from datetime import date

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


def reference_day(
    today: Optional[date] = Query(None, description="Reference day (YYYY-MM-DD); defaults to the server date")
) -> date:
    return today or date.today()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    today: date = Depends(reference_day),
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Balances, quick stats, chore progress, recent bills and reminders"""
    return service.get_dashboard(today)


@router.get("/balances", response_model=List[RoommateBalance])
async def get_balances(
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Balance of every roommate"""
    return service.get_balances()


@router.get("/balances/{roommate_id}", response_model=RoommateBalance)
async def get_balance(
    roommate_id: str,
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Balance of one roommate"""
    return service.get_balance(roommate_id)


@router.get("/reminders", response_model=List[Reminder])
async def get_reminders(
    today: date = Depends(reference_day),
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Reminders for overdue bills and chores due tomorrow or overdue"""
    return service.get_reminders(today)


@router.get("/stats", response_model=HouseholdStats)
async def get_stats(
    today: date = Depends(reference_day),
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Quick stats: total bills and chore counters"""
    return service.get_stats(today)
