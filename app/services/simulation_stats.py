"""
Simulated-interview statistics.

There is no simulation-results collection yet, so the default provider
reports zero completed simulations and the configured number of
available ones. Swap in a real provider when the collection exists;
the alert and stats code only depends on the protocol.
"""

from typing import Optional, Protocol

from app.core.config import get_settings


class SimulationStatsProvider(Protocol):
    def completed_count(self, candidate_id: str) -> int: ...

    def available_count(self, candidate_id: str) -> int: ...


class StubSimulationStatsProvider:
    """Not yet implemented: constant counts for every candidate."""

    def __init__(self, available: Optional[int] = None):
        self.available = get_settings().simulations_available if available is None else available

    def completed_count(self, candidate_id: str) -> int:
        return 0

    def available_count(self, candidate_id: str) -> int:
        return self.available
