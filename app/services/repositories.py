"""
Record-store interfaces used by the dashboard services.

The dashboard never talks to pymongo directly: it gets one repository
per collection. Production uses the pymongo services in
app.services.mongo_service; tests pass in-memory fakes.

All methods return plain dicts with the platform's field names
(candidateId, createdAt, scheduledAt, ...).
"""

from typing import List, Optional, Protocol


class DocumentRepository(Protocol):
    def find_by_candidate(self, candidate_id: str) -> List[dict]: ...

    def find_recent_by_candidate(self, candidate_id: str, limit: int) -> List[dict]: ...


class InterviewRepository(Protocol):
    def find_by_candidate(self, candidate_id: str) -> List[dict]: ...

    def find_recent_by_candidate(self, candidate_id: str, limit: int) -> List[dict]: ...


class ApplicationRepository(Protocol):
    def find_by_candidate(self, candidate_id: str) -> List[dict]: ...

    def find_recent_by_candidate(self, candidate_id: str, limit: int) -> List[dict]: ...


class UserRepository(Protocol):
    def find_by_id(self, candidate_id: str) -> Optional[dict]: ...
