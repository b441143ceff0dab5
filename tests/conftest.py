"""
Shared fixtures: in-memory repositories and a fixed clock.

The fakes implement the same methods as the pymongo services in
app.services.mongo_service, so the dashboard code runs unchanged.
"""
from datetime import datetime, timedelta, timezone

import pytest

from app.services.dashboard_service import DashboardService
from app.services.simulation_stats import StubSimulationStatsProvider

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
CANDIDATE_ID = "652f1c9e8b3a4d0012345678"


class FakeRecordRepository:
    """Documents / interviews / applications keyed by candidateId."""

    def __init__(self, records=None, error=None, fail_on=()):
        self.records = list(records or [])
        self.error = error
        self.fail_on = set(fail_on)
        self.calls = []

    def _check(self, method):
        self.calls.append(method)
        if self.error is not None and (not self.fail_on or method in self.fail_on):
            raise self.error

    def find_by_candidate(self, candidate_id):
        self._check("find_by_candidate")
        return [dict(r) for r in self.records if r.get("candidateId") == candidate_id]

    def find_recent_by_candidate(self, candidate_id, limit):
        self._check("find_recent_by_candidate")
        records = [dict(r) for r in self.records if r.get("candidateId") == candidate_id]
        records.sort(key=lambda r: r["createdAt"], reverse=True)
        return records[:limit]


class FakeUserRepository:
    def __init__(self, users=None, error=None):
        self.users = {u["_id"]: u for u in (users or [])}
        self.error = error

    def find_by_id(self, candidate_id):
        if self.error is not None:
            raise self.error
        return self.users.get(candidate_id)


def make_record(days_ago=0, candidate_id=CANDIDATE_ID, **fields):
    record = {"candidateId": candidate_id, "createdAt": NOW - timedelta(days=days_ago)}
    record.update(fields)
    return record


def full_profile(**overrides):
    user = {
        "_id": CANDIDATE_ID,
        "name": "Maria Silva",
        "email": "maria@example.com",
        "phone": "+55 11 98888-7777",
        "birthDate": datetime(1994, 3, 2, tzinfo=timezone.utc),
        "nationality": "Brasileira",
        "address": {"city": "São Paulo", "state": "SP"},
        "professionalInfo": {"summary": "Enfermeira com 6 anos de experiência."},
        "skills": ["Atendimento"],
        "education": [{"degree": "Bacharelado"}],
        "languages": ["Português", "Inglês"],
        "type": "candidato",
        "status": "approved",
        "createdAt": NOW - timedelta(days=100),
        "updatedAt": NOW - timedelta(days=2),
    }
    user.update(overrides)
    return user


def build_service(documents=(), interviews=(), applications=(), users=(), **repos):
    """DashboardService over fakes. Pass *_repo kwargs to replace a fake entirely."""
    return DashboardService(
        documents=repos.get("documents_repo") or FakeRecordRepository(documents),
        interviews=repos.get("interviews_repo") or FakeRecordRepository(interviews),
        applications=repos.get("applications_repo") or FakeRecordRepository(applications),
        users=repos.get("users_repo") or FakeUserRepository(users),
        simulations=StubSimulationStatsProvider(available=5),
        clock=lambda: NOW,
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def candidate_id():
    return CANDIDATE_ID


@pytest.fixture
def complete_user():
    return full_profile()
