"""
Candidate Dashboard Service
Dashboard aggregation for the recruitment platform's candidate area.

Architecture:
- MongoDB: platform records (users, documents, interviews, applications), read-only
- Services: alert rules, quick stats, recent activity, profile completion
- FastAPI: one authenticated endpoint for the candidate dashboard
"""

__version__ = "1.0.0"
