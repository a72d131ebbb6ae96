"""Dependency container wiring for the application."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from water_intake.adapters.memory_record_store import InMemoryRecordStore
from water_intake.config import Settings
from water_intake.services.intake import IntakeService, RecordStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_store: RecordStore
    intake_service: IntakeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_store = InMemoryRecordStore()
    intake_service = IntakeService(
        store=record_store,
        timezone=ZoneInfo(resolved_settings.timezone),
        max_amount=resolved_settings.max_amount_oz,
    )
    return AppContainer(
        settings=resolved_settings,
        record_store=record_store,
        intake_service=intake_service,
    )
