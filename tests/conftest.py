"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from water_intake.adapters.memory_record_store import InMemoryRecordStore
from water_intake.config import Settings
from water_intake.containers import AppContainer
from water_intake.services.intake import IntakeService

FIXED_NOW = datetime(2024, 1, 8, 12, 0, tzinfo=UTC)


@dataclass
class FakeClock:
    """Clock returning a settable instant."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone="UTC", max_amount_oz=100.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def intake_service(
    settings: Settings, record_store: InMemoryRecordStore, clock: FakeClock
) -> IntakeService:
    return IntakeService(
        store=record_store,
        timezone=ZoneInfo(settings.timezone),
        max_amount=settings.max_amount_oz,
        clock=clock,
    )


@pytest.fixture
def container(
    settings: Settings,
    record_store: InMemoryRecordStore,
    intake_service: IntakeService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        record_store=record_store,
        intake_service=intake_service,
    )
