"""
In-memory workout log: ordered records keyed by integer id, plus the weekly goal.
Ids come from a counter that is never reset, so a deleted id is never handed out again.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import date

from fitlog.schemas.workout import GymDetails, OutdoorDetails, WorkoutFields, WorkoutRecord, details_for
from fitlog.services.summary import format_summary

logger = logging.getLogger(__name__)


class SummaryListing:
    """Lazy view over the store's summaries; each iteration starts again from the first record."""

    def __init__(self, records: list[WorkoutRecord]):
        self._records = records

    def __iter__(self) -> Iterator[str]:
        for record in self._records:
            yield format_summary(record)

    def __len__(self) -> int:
        return len(self._records)


class LogStore:
    def __init__(self, clock: Callable[[], date] = date.today):
        self._records: list[WorkoutRecord] = []
        self._last_id = 0
        self._clock = clock
        self.weekly_goal = 0  # minutes; 0 = unset. Changed only via aggregator.set_goal

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[WorkoutRecord, ...]:
        return tuple(self._records)

    def today(self) -> date:
        return self._clock()

    def add_record(self, fields: WorkoutFields, details: OutdoorDetails | GymDetails) -> WorkoutRecord:
        """Append a new record dated today with the next id."""
        self._last_id += 1
        record = WorkoutRecord.build(self._last_id, fields, details, self._clock())
        self._records.append(record)
        logger.info("Workout added: id=%s kind=%s", record.id, record.kind.value)
        return record

    def list_records(self) -> SummaryListing | None:
        """Summaries in insertion order, or None when the log is empty."""
        if not self._records:
            return None
        return SummaryListing(self._records)

    def find_by_id(self, record_id: int) -> WorkoutRecord | None:
        return next((r for r in self._records if r.id == record_id), None)

    def _index_of(self, record_id: int) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return None

    def update_by_id(self, record_id: int, fields: WorkoutFields, detail: str) -> WorkoutRecord | None:
        """
        Replace all descriptive fields of the record in place and reset its date to today.
        Id and kind are kept; `detail` is the new weather condition or equipment.
        Returns None (and changes nothing) when the id is unknown.
        """
        index = self._index_of(record_id)
        if index is None:
            logger.debug("Update skipped: id=%s not found", record_id)
            return None
        old = self._records[index]
        updated = WorkoutRecord.build(old.id, fields, details_for(old.kind, detail), self._clock())
        self._records[index] = updated
        logger.info("Workout updated: id=%s", record_id)
        return updated

    def delete_by_id(self, record_id: int) -> bool:
        """Remove the first record with this id; remaining ids are untouched."""
        index = self._index_of(record_id)
        if index is None:
            logger.debug("Delete skipped: id=%s not found", record_id)
            return False
        del self._records[index]
        logger.info("Workout deleted: id=%s", record_id)
        return True
