"""
Dashboard Alert Service

PURPOSE:
Scan a candidate's records and emit advisory alerts for the dashboard.

HOW IT WORKS:
1. Five generators (documents, interviews, simulations, profile,
   applications) each fetch their own records
2. Each rule that matches emits ONE alert with a fixed id, no matter
   how many records triggered it (counts go in alert.data)
3. All alerts are merged and sorted: urgent > high > medium > low

The rule functions (document_alerts, interview_alerts, ...) are pure:
they take records plus "now" and return alerts, so they are easy to test.
"""

import asyncio
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from app.schemas.schemas import (
    AlertAction, AlertPriority, AlertType, DashboardAlert, PRIORITY_ORDER
)
from app.services.profile_completion import calculate_profile_completion
from app.services.repositories import (
    ApplicationRepository, DocumentRepository, InterviewRepository, UserRepository
)
from app.services.simulation_stats import SimulationStatsProvider
from app.utils.dates import as_utc


# ============================================================
# THRESHOLDS
# ============================================================

REQUIRED_DOCUMENT_TYPES = ["cv", "passport", "diploma"]
PENDING_DOCUMENT_MAX_AGE = timedelta(days=7)
UPCOMING_INTERVIEW_WINDOW = timedelta(hours=24)
SCHEDULED_INTERVIEW_WINDOW = timedelta(days=7)
PROFILE_COMPLETION_MIN = 70
STALE_PROFILE_AGE = timedelta(days=30)
STALE_APPLICATION_AGE = timedelta(days=14)

DOCUMENTS_URL = "/candidato/documentos"
INTERVIEWS_URL = "/candidato/entrevistas"
SIMULATIONS_URL = "/candidato/simulacoes"
PROFILE_URL = "/candidato/perfil"
APPLICATIONS_URL = "/candidato/candidaturas"


def _created_before(record: dict, cutoff: datetime) -> bool:
    created_at = as_utc(record.get("createdAt"))
    return created_at is not None and created_at < cutoff


def _scheduled_within(record: dict, now: datetime, window: timedelta) -> bool:
    scheduled_at = as_utc(record.get("scheduledAt"))
    if scheduled_at is None:
        return False
    time_diff = scheduled_at - now
    return timedelta(0) < time_diff <= window


# ============================================================
# RULES
# ============================================================

def document_alerts(documents: List[dict], now: datetime) -> List[DashboardAlert]:
    alerts = []

    rejected = [doc for doc in documents if doc.get("status") == "rejected"]
    if rejected:
        alerts.append(DashboardAlert(
            id="rejected-documents",
            type=AlertType.document,
            priority=AlertPriority.high,
            title="Documentos Rejeitados",
            message=f"Você tem {len(rejected)} documento(s) rejeitado(s) que precisam ser corrigidos.",
            action=AlertAction(label="Ver Documentos", url=DOCUMENTS_URL),
            data={"rejectedCount": len(rejected)},
            created_at=now
        ))

    cutoff = now - PENDING_DOCUMENT_MAX_AGE
    pending_long = [
        doc for doc in documents
        if doc.get("status") == "pending" and _created_before(doc, cutoff)
    ]
    if pending_long:
        alerts.append(DashboardAlert(
            id="pending-documents-long",
            type=AlertType.document,
            priority=AlertPriority.medium,
            title="Documentos Pendentes",
            message=f"Você tem {len(pending_long)} documento(s) pendente(s) há mais de 7 dias.",
            action=AlertAction(label="Ver Documentos", url=DOCUMENTS_URL),
            data={"pendingCount": len(pending_long)},
            created_at=now
        ))

    existing_types = {doc.get("type") for doc in documents}
    missing_types = [t for t in REQUIRED_DOCUMENT_TYPES if t not in existing_types]
    if missing_types:
        alerts.append(DashboardAlert(
            id="missing-required-documents",
            type=AlertType.document,
            priority=AlertPriority.urgent,
            title="Documentos Obrigatórios Faltando",
            message=f"Você precisa enviar: {', '.join(missing_types)}.",
            action=AlertAction(label="Enviar Documentos", url=DOCUMENTS_URL),
            data={"missingTypes": missing_types},
            created_at=now
        ))

    return alerts


def interview_alerts(interviews: List[dict], now: datetime) -> List[DashboardAlert]:
    alerts = []

    upcoming = [i for i in interviews if _scheduled_within(i, now, UPCOMING_INTERVIEW_WINDOW)]
    if upcoming:
        alerts.append(DashboardAlert(
            id="upcoming-interviews",
            type=AlertType.interview,
            priority=AlertPriority.urgent,
            title="Entrevistas Próximas",
            message=f"Você tem {len(upcoming)} entrevista(s) nas próximas 24 horas.",
            action=AlertAction(label="Ver Entrevistas", url=INTERVIEWS_URL),
            data={"upcomingCount": len(upcoming)},
            created_at=now
        ))

    # Includes the 24h window, so one interview can raise both alerts
    scheduled = [i for i in interviews if _scheduled_within(i, now, SCHEDULED_INTERVIEW_WINDOW)]
    if scheduled:
        alerts.append(DashboardAlert(
            id="scheduled-interviews",
            type=AlertType.interview,
            priority=AlertPriority.medium,
            title="Entrevistas Agendadas",
            message=f"Você tem {len(scheduled)} entrevista(s) agendada(s) para esta semana.",
            action=AlertAction(label="Ver Entrevistas", url=INTERVIEWS_URL),
            data={"scheduledCount": len(scheduled)},
            created_at=now
        ))

    return alerts


def simulation_alerts(completed: int, available: int, now: datetime) -> List[DashboardAlert]:
    if completed != 0:
        return []
    return [DashboardAlert(
        id="no-simulations",
        type=AlertType.simulation,
        priority=AlertPriority.medium,
        title="Simulações Disponíveis",
        message=f"Você tem {available} simulações disponíveis para praticar.",
        action=AlertAction(label="Fazer Simulações", url=SIMULATIONS_URL),
        data={"availableCount": available},
        created_at=now
    )]


def profile_alerts(user: Optional[dict], now: datetime) -> List[DashboardAlert]:
    """No alerts at all when the user record is missing."""
    if not user:
        return []

    alerts = []
    completion = calculate_profile_completion(user)
    if completion < PROFILE_COMPLETION_MIN:
        alerts.append(DashboardAlert(
            id="incomplete-profile",
            type=AlertType.profile,
            priority=AlertPriority.high,
            title="Perfil Incompleto",
            message=f"Seu perfil está {completion}% completo. Complete para receber mais recomendações.",
            action=AlertAction(label="Completar Perfil", url=PROFILE_URL),
            data={"completion": completion},
            created_at=now
        ))

    last_update = as_utc(user.get("updatedAt")) or as_utc(user.get("createdAt"))
    if last_update is not None:
        since_update = now - last_update
        if since_update > STALE_PROFILE_AGE:
            alerts.append(DashboardAlert(
                id="stale-profile",
                type=AlertType.profile,
                priority=AlertPriority.low,
                title="Perfil Desatualizado",
                message="Seu perfil não é atualizado há mais de 30 dias. Considere atualizá-lo.",
                action=AlertAction(label="Atualizar Perfil", url=PROFILE_URL),
                data={"daysSinceUpdate": since_update // timedelta(days=1)},
                created_at=now
            ))

    return alerts


def application_alerts(applications: List[dict], now: datetime) -> List[DashboardAlert]:
    cutoff = now - STALE_APPLICATION_AGE
    stale = [
        app for app in applications
        if app.get("status") == "pending" and _created_before(app, cutoff)
    ]
    if not stale:
        return []
    return [DashboardAlert(
        id="stale-applications",
        type=AlertType.application,
        priority=AlertPriority.low,
        title="Candidaturas Sem Resposta",
        message=f"Você tem {len(stale)} candidatura(s) sem resposta há mais de 14 dias.",
        action=AlertAction(label="Ver Candidaturas", url=APPLICATIONS_URL),
        data={"staleCount": len(stale)},
        created_at=now
    )]


def sort_alerts(alerts: List[DashboardAlert]) -> List[DashboardAlert]:
    """Priority descending, then newest first. Stable for full ties."""
    return sorted(
        alerts,
        key=lambda alert: (PRIORITY_ORDER[alert.priority], alert.created_at),
        reverse=True
    )


# ============================================================
# SERVICE
# ============================================================

class AlertService:
    """
    Fetches records through the repositories and applies the rules above.
    Errors are NOT caught here; the dashboard facade handles them.
    """

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

    async def get_document_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        documents = await run_in_threadpool(self.documents.find_by_candidate, candidate_id)
        return document_alerts(documents, now)

    async def get_interview_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        interviews = await run_in_threadpool(self.interviews.find_by_candidate, candidate_id)
        return interview_alerts(interviews, now)

    async def get_simulation_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        completed = await run_in_threadpool(self.simulations.completed_count, candidate_id)
        available = await run_in_threadpool(self.simulations.available_count, candidate_id)
        return simulation_alerts(completed, available, now)

    async def get_profile_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        user = await run_in_threadpool(self.users.find_by_id, candidate_id)
        return profile_alerts(user, now)

    async def get_application_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        applications = await run_in_threadpool(self.applications.find_by_candidate, candidate_id)
        return application_alerts(applications, now)

    async def generate_alerts(self, candidate_id: str, now: datetime) -> List[DashboardAlert]:
        """Run all generators concurrently, merge in a fixed order, then sort."""
        groups = await asyncio.gather(
            self.get_document_alerts(candidate_id, now),
            self.get_interview_alerts(candidate_id, now),
            self.get_simulation_alerts(candidate_id, now),
            self.get_profile_alerts(candidate_id, now),
            self.get_application_alerts(candidate_id, now),
        )
        alerts = [alert for group in groups for alert in group]
        return sort_alerts(alerts)
