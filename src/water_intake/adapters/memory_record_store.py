"""In-memory record store for intake entries."""

from dataclasses import dataclass, field

from water_intake.domain.intake import IntakeRecord
from water_intake.services.intake import RecordStore


@dataclass
class InMemoryRecordStore(RecordStore):
    """Append-only store holding records for the process lifetime."""

    records: list[IntakeRecord] = field(default_factory=list)

    def append(self, record: IntakeRecord) -> None:
        """Append a record."""
        self.records.append(record)

    def all(self) -> list[IntakeRecord]:
        """Return a copy of the records in insertion order."""
        return list(self.records)
