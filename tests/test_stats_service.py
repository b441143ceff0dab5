"""Tests for the quick stats calculator."""

import asyncio
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from app.schemas.schemas import QuickStats
from app.services.simulation_stats import StubSimulationStatsProvider
from app.services.stats_service import QuickStatsService, compute_quick_stats
from conftest import CANDIDATE_ID, NOW, FakeRecordRepository, FakeUserRepository, make_record

DOCUMENTS = [
    make_record(type="cv", status="verified"),
    make_record(type="passport", status="pending"),
    make_record(type="diploma", status="pending"),
    make_record(type="certificate", status="rejected"),
]

INTERVIEWS = [
    make_record(status="scheduled", scheduledAt=NOW + timedelta(days=2)),
    make_record(status="confirmed", scheduledAt=NOW + timedelta(days=2)),
    make_record(status="scheduled", scheduledAt=NOW - timedelta(days=2)),
    make_record(status="completed", scheduledAt=NOW - timedelta(days=9)),
]

APPLICATIONS = [
    make_record(status="pending"),
    make_record(status="pending"),
    make_record(status="shortlisted"),
    make_record(status="rejected"),
    make_record(status="accepted"),
    make_record(status="reviewed"),
]


class TestComputeQuickStats:

    def test_counts(self, complete_user):
        stats = compute_quick_stats(
            DOCUMENTS, INTERVIEWS, APPLICATIONS, complete_user,
            completed_simulations=0, available_simulations=5, now=NOW
        )

        assert stats == QuickStats(
            total_documents=4,
            pending_documents=2,
            verified_documents=1,
            rejected_documents=1,
            upcoming_interviews=1,
            total_interviews=4,
            completed_interviews=1,
            total_applications=6,
            pending_applications=2,
            shortlisted_applications=1,
            rejected_applications=1,
            accepted_applications=1,
            completed_simulations=0,
            available_simulations=5,
            profile_completion=100,
        )

    def test_empty_collections_and_missing_user(self):
        stats = compute_quick_stats([], [], [], None, 0, 5, NOW)

        assert stats.total_documents == 0
        assert stats.upcoming_interviews == 0
        assert stats.total_applications == 0
        assert stats.profile_completion == 0
        assert stats.available_simulations == 5


class TestQuickStatsService:

    def test_reads_each_collection_once(self, complete_user):
        documents = FakeRecordRepository(DOCUMENTS)
        interviews = FakeRecordRepository(INTERVIEWS)
        applications = FakeRecordRepository(APPLICATIONS)
        service = QuickStatsService(
            documents, interviews, applications,
            FakeUserRepository([complete_user]),
            StubSimulationStatsProvider(available=3)
        )

        stats = asyncio.run(service.calculate_quick_stats(CANDIDATE_ID, NOW))

        assert stats.pending_documents == 2
        assert stats.available_simulations == 3
        assert stats.profile_completion == 100
        assert documents.calls == ["find_by_candidate"]
        assert interviews.calls == ["find_by_candidate"]
        assert applications.calls == ["find_by_candidate"]

    def test_simulation_counts_come_from_provider(self):
        provider = MagicMock()
        provider.completed_count.return_value = 2
        provider.available_count.return_value = 7
        service = QuickStatsService(
            FakeRecordRepository(), FakeRecordRepository(), FakeRecordRepository(),
            FakeUserRepository(), provider
        )

        stats = asyncio.run(service.calculate_quick_stats(CANDIDATE_ID, NOW))

        provider.completed_count.assert_called_once_with(CANDIDATE_ID)
        provider.available_count.assert_called_once_with(CANDIDATE_ID)
        assert stats.completed_simulations == 2
        assert stats.available_simulations == 7

    def test_simulation_provider_errors_propagate(self):
        provider = MagicMock()
        provider.completed_count.side_effect = RuntimeError("simulations down")
        service = QuickStatsService(
            FakeRecordRepository(), FakeRecordRepository(), FakeRecordRepository(),
            FakeUserRepository(), provider
        )

        with pytest.raises(RuntimeError):
            asyncio.run(service.calculate_quick_stats(CANDIDATE_ID, NOW))
