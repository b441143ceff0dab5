"""
Recent Activity Service

Builds the dashboard activity feed from the candidate's own documents,
interviews and applications.

Two-stage cut:
1. the 5 most recently created records of EACH source (query-level limit)
2. merge (up to 15), sort by date, keep the 10 newest

There is no per-type quota after stage 1, so a burst of documents can
push older interviews/applications out of the feed.
"""

import asyncio
from datetime import datetime
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from app.schemas.schemas import ActivityItem
from app.services.repositories import (
    ApplicationRepository, DocumentRepository, InterviewRepository
)
from app.utils.dates import as_utc

PER_SOURCE_LIMIT = 5
FEED_LIMIT = 10


# ============================================================
# STATUS LABELS (pt-BR, as shown in the candidate area)
# ============================================================

DOCUMENT_LABELS = {"verified": "aprovado", "rejected": "rejeitado"}
DOCUMENT_DEFAULT_TITLE = "enviado"
DOCUMENT_DEFAULT_DESCRIPTION = "enviado para análise"

INTERVIEW_LABELS = {
    "scheduled": "agendada",
    "completed": "realizada",
    "cancelled": "cancelada",
}
INTERVIEW_DEFAULT_LABEL = "pendente"

APPLICATION_LABELS = {
    "pending": "enviada",
    "shortlisted": "pré-selecionada",
    "rejected": "rejeitada",
    "accepted": "aceita",
}
APPLICATION_DEFAULT_LABEL = "em análise"


def _activity(kind: str, record: dict, title: str, description: str) -> Optional[ActivityItem]:
    created_at = as_utc(record.get("createdAt"))
    if created_at is None:
        return None
    return ActivityItem(
        type=kind,
        title=title,
        description=description,
        date=created_at,
        status=record.get("status"),
        message=description,
        timestamp=created_at.isoformat()
    )


def document_activity(doc: dict) -> Optional[ActivityItem]:
    status = doc.get("status")
    doc_type = doc.get("type")
    title_label = DOCUMENT_LABELS.get(status, DOCUMENT_DEFAULT_TITLE)
    description_label = DOCUMENT_LABELS.get(status, DOCUMENT_DEFAULT_DESCRIPTION)
    return _activity(
        "document",
        doc,
        title=f"Documento {doc_type} {title_label}",
        description=f"Documento de {doc_type} foi {description_label}"
    )


def interview_activity(interview: dict) -> Optional[ActivityItem]:
    label = INTERVIEW_LABELS.get(interview.get("status"), INTERVIEW_DEFAULT_LABEL)
    return _activity(
        "interview",
        interview,
        title=f"Entrevista {label}",
        description=f"Entrevista foi {label}"
    )


def application_activity(application: dict) -> Optional[ActivityItem]:
    label = APPLICATION_LABELS.get(application.get("status"), APPLICATION_DEFAULT_LABEL)
    return _activity(
        "application",
        application,
        title=f"Candidatura {label}",
        description=f"Candidatura foi {label}"
    )


def build_activity_feed(
    documents: List[dict],
    interviews: List[dict],
    applications: List[dict],
    limit: int = FEED_LIMIT
) -> List[ActivityItem]:
    """
    Map already-capped per-source records to activity items and keep the
    newest `limit`. Records without createdAt are left out of the feed.
    """
    items = (
        [document_activity(doc) for doc in documents]
        + [interview_activity(i) for i in interviews]
        + [application_activity(app) for app in applications]
    )
    items = [item for item in items if item is not None]
    items.sort(key=lambda item: item.date, reverse=True)
    return items[:limit]


class RecentActivityService:
    def __init__(
        self,
        documents: DocumentRepository,
        interviews: InterviewRepository,
        applications: ApplicationRepository
    ):
        self.documents = documents
        self.interviews = interviews
        self.applications = applications

    async def get_recent_activity(self, candidate_id: str) -> List[ActivityItem]:
        documents, interviews, applications = await asyncio.gather(
            run_in_threadpool(self.documents.find_recent_by_candidate, candidate_id, PER_SOURCE_LIMIT),
            run_in_threadpool(self.interviews.find_recent_by_candidate, candidate_id, PER_SOURCE_LIMIT),
            run_in_threadpool(self.applications.find_recent_by_candidate, candidate_id, PER_SOURCE_LIMIT),
        )
        return build_activity_feed(documents, interviews, applications)
