"""
Pydantic Schemas - Dashboard response models

All API response schemas in one file for simplicity.
Records read from MongoDB stay plain dicts; only what we compute
and send to the client is modelled here.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class AlertType(str, Enum):
    document = "document"
    interview = "interview"
    simulation = "simulation"
    application = "application"
    profile = "profile"
    general = "general"


class AlertPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


# Sort weight, higher comes first
PRIORITY_ORDER = {
    AlertPriority.urgent: 4,
    AlertPriority.high: 3,
    AlertPriority.medium: 2,
    AlertPriority.low: 1,
}


class UserType(str, Enum):
    candidate = "candidato"
    company = "empresa"
    admin = "admin"


class UserStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    suspended = "suspended"


# ============================================================
# ALERT SCHEMAS
# ============================================================

class AlertAction(BaseModel):
    label: str
    url: str


class DashboardAlert(BaseModel):
    """Computed advisory shown on the dashboard. Never persisted."""
    id: str
    type: AlertType
    priority: AlertPriority
    title: str
    message: str
    action: Optional[AlertAction] = None
    data: Optional[Dict[str, Any]] = None
    created_at: datetime


# ============================================================
# QUICK STATS
# ============================================================

class QuickStats(BaseModel):
    total_documents: int = 0
    pending_documents: int = 0
    verified_documents: int = 0
    rejected_documents: int = 0

    upcoming_interviews: int = 0
    total_interviews: int = 0
    completed_interviews: int = 0

    total_applications: int = 0
    pending_applications: int = 0
    shortlisted_applications: int = 0
    rejected_applications: int = 0
    accepted_applications: int = 0

    completed_simulations: int = 0
    available_simulations: int = 0

    profile_completion: int = Field(0, ge=0, le=100)


# ============================================================
# RECENT ACTIVITY
# ============================================================

class ActivityItem(BaseModel):
    type: str
    title: str
    description: str
    date: datetime
    status: Optional[str] = None
    message: str
    timestamp: str


# ============================================================
# SUMMARY
# ============================================================

class DashboardSummary(BaseModel):
    alerts: List[DashboardAlert] = []
    quick_stats: QuickStats = Field(default_factory=QuickStats)
    recent_activity: List[ActivityItem] = []

    @classmethod
    def empty(cls) -> "DashboardSummary":
        """No alerts, zeroed stats, no activity."""
        return cls(alerts=[], quick_stats=QuickStats(), recent_activity=[])


class DashboardSummaryResponse(BaseModel):
    summary: DashboardSummary
