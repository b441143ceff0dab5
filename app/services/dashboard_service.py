"""
Dashboard Summary Service

Single entry point for the candidate dashboard:

    service = get_dashboard_service()
    summary = await service.get_dashboard_summary(candidate_id)

Alerts, quick stats and recent activity are independent of each other,
so the three sections run concurrently. Each section only reads.

ERROR HANDLING:
- A failure in any section is wrapped in AggregationError(section=...)
- collect() returns it instead of raising (SummaryResult)
- get_dashboard_summary() logs the failing section and returns an
  EMPTY summary. Callers never see an exception, and cannot tell
  "no data" from "read failed"; the log line is the only trace.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional, TypeVar

import structlog

from app.schemas.schemas import DashboardSummary
from app.services.activity_service import RecentActivityService
from app.services.alert_service import AlertService
from app.services.mongo_service import get_mongo_services
from app.services.repositories import (
    ApplicationRepository, DocumentRepository, InterviewRepository, UserRepository
)
from app.services.simulation_stats import SimulationStatsProvider, StubSimulationStatsProvider
from app.services.stats_service import QuickStatsService
from app.utils.dates import utc_now

logger = structlog.get_logger()

T = TypeVar("T")


class AggregationError(Exception):
    """A dashboard section failed. `section` names which one."""

    def __init__(self, section: str, cause: Exception):
        self.section = section
        self.cause = cause
        super().__init__(f"{section} failed: {type(cause).__name__}: {cause}")


@dataclass
class SummaryResult:
    summary: Optional[DashboardSummary] = None
    error: Optional[AggregationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardService:
    """
    Composes the alert, quick-stats and recent-activity services.

    Every collaborator can be injected; anything left out defaults to the
    MongoDB-backed implementation.
    """

    def __init__(
        self,
        documents: Optional[DocumentRepository] = None,
        interviews: Optional[InterviewRepository] = None,
        applications: Optional[ApplicationRepository] = None,
        users: Optional[UserRepository] = None,
        simulations: Optional[SimulationStatsProvider] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        if None in (documents, interviews, applications, users):
            mongo_services = get_mongo_services()
            documents = documents if documents is not None else mongo_services["documents"]
            interviews = interviews if interviews is not None else mongo_services["interviews"]
            applications = applications if applications is not None else mongo_services["applications"]
            users = users if users is not None else mongo_services["users"]
        if simulations is None:
            simulations = StubSimulationStatsProvider()

        self.clock = clock
        self.alert_service = AlertService(documents, interviews, applications, users, simulations)
        self.stats_service = QuickStatsService(documents, interviews, applications, users, simulations)
        self.activity_service = RecentActivityService(documents, interviews, applications)

    async def _run_section(self, section: str, coro: Awaitable[T]) -> T:
        try:
            return await coro
        except Exception as e:
            raise AggregationError(section, e) from e

    async def collect(self, candidate_id: str) -> SummaryResult:
        """Build the summary, reporting the first failed section instead of raising."""
        now = self.clock()
        try:
            alerts, quick_stats, recent_activity = await asyncio.gather(
                self._run_section("alerts", self.alert_service.generate_alerts(candidate_id, now)),
                self._run_section("quick_stats", self.stats_service.calculate_quick_stats(candidate_id, now)),
                self._run_section("recent_activity", self.activity_service.get_recent_activity(candidate_id)),
            )
        except AggregationError as e:
            return SummaryResult(error=e)

        return SummaryResult(summary=DashboardSummary(
            alerts=alerts,
            quick_stats=quick_stats,
            recent_activity=recent_activity
        ))

    async def get_dashboard_summary(self, candidate_id: str) -> DashboardSummary:
        """Always succeeds: degrades to an empty summary on any read failure."""
        result = await self.collect(candidate_id)
        if not result.ok:
            logger.error(
                "dashboard_summary_degraded",
                candidate_id=str(candidate_id),
                section=result.error.section,
                error=str(result.error.cause),
                error_type=type(result.error.cause).__name__,
                exc_info=result.error,
            )
            return DashboardSummary.empty()

        logger.info(
            "dashboard_summary_built",
            candidate_id=str(candidate_id),
            alerts=len(result.summary.alerts),
            activity=len(result.summary.recent_activity),
        )
        return result.summary


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_dashboard_service() -> DashboardService:
    """Get dashboard service instance (FastAPI dependency)."""
    return DashboardService()
