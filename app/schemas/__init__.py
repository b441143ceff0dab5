"""
Schemas module - Response schemas for the dashboard API.

Request bodies are not needed: the only endpoint is a GET
authenticated by bearer token.
"""

from app.schemas.schemas import (
    AlertType, AlertPriority, AlertAction, DashboardAlert,
    QuickStats, ActivityItem, DashboardSummary, DashboardSummaryResponse
)

__all__ = [
    "AlertType",
    "AlertPriority",
    "AlertAction",
    "DashboardAlert",
    "QuickStats",
    "ActivityItem",
    "DashboardSummary",
    "DashboardSummaryResponse",
]
