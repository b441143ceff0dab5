"""
Quick Stats Service - flat counts for the dashboard tiles.

Reads documents, interviews, applications and the user once (concurrently)
and counts by status. No joins between collections.
"""

import asyncio
from collections import Counter
from datetime import datetime
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from app.schemas.schemas import QuickStats
from app.services.profile_completion import calculate_profile_completion
from app.services.repositories import (
    ApplicationRepository, DocumentRepository, InterviewRepository, UserRepository
)
from app.services.simulation_stats import SimulationStatsProvider
from app.utils.dates import as_utc


def _is_upcoming(interview: dict, now: datetime) -> bool:
    scheduled_at = as_utc(interview.get("scheduledAt"))
    return (
        scheduled_at is not None
        and scheduled_at > now
        and interview.get("status") == "scheduled"
    )


def compute_quick_stats(
    documents: List[dict],
    interviews: List[dict],
    applications: List[dict],
    user: Optional[dict],
    completed_simulations: int,
    available_simulations: int,
    now: datetime
) -> QuickStats:
    doc_status = Counter(doc.get("status") for doc in documents)
    interview_status = Counter(i.get("status") for i in interviews)
    app_status = Counter(app.get("status") for app in applications)

    return QuickStats(
        total_documents=len(documents),
        pending_documents=doc_status["pending"],
        verified_documents=doc_status["verified"],
        rejected_documents=doc_status["rejected"],
        upcoming_interviews=sum(1 for i in interviews if _is_upcoming(i, now)),
        total_interviews=len(interviews),
        completed_interviews=interview_status["completed"],
        total_applications=len(applications),
        pending_applications=app_status["pending"],
        shortlisted_applications=app_status["shortlisted"],
        rejected_applications=app_status["rejected"],
        accepted_applications=app_status["accepted"],
        completed_simulations=completed_simulations,
        available_simulations=available_simulations,
        profile_completion=calculate_profile_completion(user)
    )


class QuickStatsService:
    def __init__(
        self,
        documents: DocumentRepository,
        interviews: InterviewRepository,
        applications: ApplicationRepository,
        users: UserRepository,
        simulations: SimulationStatsProvider
    ):
        self.documents = documents
        self.interviews = interviews
        self.applications = applications
        self.users = users
        self.simulations = simulations

    async def calculate_quick_stats(self, candidate_id: str, now: datetime) -> QuickStats:
        documents, interviews, applications, user, completed, available = await asyncio.gather(
            run_in_threadpool(self.documents.find_by_candidate, candidate_id),
            run_in_threadpool(self.interviews.find_by_candidate, candidate_id),
            run_in_threadpool(self.applications.find_by_candidate, candidate_id),
            run_in_threadpool(self.users.find_by_id, candidate_id),
            run_in_threadpool(self.simulations.completed_count, candidate_id),
            run_in_threadpool(self.simulations.available_count, candidate_id),
        )
        return compute_quick_stats(
            documents,
            interviews,
            applications,
            user,
            completed_simulations=completed,
            available_simulations=available,
            now=now
        )
