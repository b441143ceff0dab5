"""
Candidate Dashboard Routes

GET /candidates/dashboard-summary - Alerts, quick stats and recent activity
"""

from fastapi import APIRouter, Depends

from app.core.auth import get_current_candidate
from app.services.dashboard_service import DashboardService, get_dashboard_service
from app.schemas.schemas import DashboardSummaryResponse

router = APIRouter(prefix="/candidates", tags=["Candidates"])


@router.get("/dashboard-summary", response_model=DashboardSummaryResponse)
async def dashboard_summary(
    candidate: dict = Depends(get_current_candidate),
    service: DashboardService = Depends(get_dashboard_service)
):
    """
    Dashboard summary for the logged-in candidate.

    Always returns 200 for an approved candidate: if a read fails the
    summary comes back empty (the failure is logged server-side).
    """
    summary = await service.get_dashboard_summary(candidate["user_id"])
    return DashboardSummaryResponse(summary=summary)
