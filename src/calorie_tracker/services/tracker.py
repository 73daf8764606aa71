"""Tracker state manager for logged days."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from calorie_tracker.domain.errors import DayNotFoundError, LookupInProgressError
from calorie_tracker.domain.tracker import (
    ChartPoint,
    DayRecord,
    MacroBreakdown,
    RunningTotals,
)
from calorie_tracker.services.aggregation import build_day_record
from calorie_tracker.services.lookup import LookupService
from calorie_tracker.services.normalization import normalize_food_text
from calorie_tracker.services.storage import KeyValueStore, dump_days, load_days

CLEAR_ALL_PROMPT = "Clear all logged days? This cannot be undone."

_logger = logging.getLogger(__name__)


class Confirmation(Protocol):
    """Yes/no prompt shown before destructive actions."""

    def confirm(self, message: str) -> bool:
        """Return True when the user agrees."""


@dataclass(frozen=True)
class StaticConfirmation(Confirmation):
    """Confirmation whose answer is already known."""

    answer: bool

    def confirm(self, message: str) -> bool:
        """Return the fixed answer."""
        return self.answer


@dataclass
class TrackerService:
    """Owns the ordered day list and keeps the stored snapshot in sync."""

    lookup_service: LookupService
    store: KeyValueStore
    storage_key: str = "calorieData"
    _days: list[DayRecord] = field(default_factory=list, init=False)
    _in_flight: bool = field(default=False, init=False)
    _expanded_day: int | None = field(default=None, init=False)

    @property
    def days(self) -> tuple[DayRecord, ...]:
        """Logged days in chronological order."""
        return tuple(self._days)

    @property
    def next_day(self) -> int:
        """Index the next successful submission will receive."""
        return len(self._days) + 1

    @property
    def in_flight(self) -> bool:
        """True while a lookup is outstanding."""
        return self._in_flight

    @property
    def expanded_day(self) -> int | None:
        """Day currently expanded in the log, if any."""
        return self._expanded_day

    def restore(self) -> None:
        """Load the stored day list, falling back to an empty one."""
        raw = self.store.get_item(self.storage_key)
        if raw is None:
            self._days = []
            return
        try:
            self._days = load_days(raw)
        except ValueError as exc:
            _logger.warning("Discarding unreadable day snapshot: %s", exc)
            self._days = []
            return
        _logger.info("Restored %s logged days", len(self._days))

    async def record_day(self, food_text: str) -> DayRecord | None:
        """Look up a food description and log it as the next day.

        Returns None without side effects for blank input. Lookup errors
        propagate after the in-flight flag is cleared and leave the day list
        untouched.
        """
        query = normalize_food_text(food_text).strip()
        if not query:
            return None
        if self._in_flight:
            raise LookupInProgressError("A lookup is already in progress")

        self._in_flight = True
        try:
            items = await self.lookup_service.lookup(query)
        finally:
            self._in_flight = False

        record = build_day_record(items, self.next_day)
        days = [*self._days, record]
        self.store.set_item(self.storage_key, dump_days(days))
        self._days = days
        _logger.info(
            "Logged day %s: %s items, %.1f kcal", record.day, len(items), record.total
        )
        return record

    def toggle_expand(self, day: int) -> int | None:
        """Expand a day, or collapse it when it is already expanded."""
        self._get_day(day)
        self._expanded_day = None if self._expanded_day == day else day
        return self._expanded_day

    def clear_all(self, confirmation: Confirmation) -> bool:
        """Drop every logged day after the user confirms."""
        if not confirmation.confirm(CLEAR_ALL_PROMPT):
            return False
        self.store.remove_item(self.storage_key)
        self._days = []
        self._expanded_day = None
        _logger.info("Cleared all logged days")
        return True

    def derive_chart_series(self) -> list[ChartPoint]:
        """Calories per day for the line chart."""
        return [
            ChartPoint(label=f"Day {record.day}", value=record.total)
            for record in self._days
        ]

    def derive_macro_breakdown(self, day: int) -> MacroBreakdown:
        """Protein, carbs and fat of one day for the pie chart."""
        record = self._get_day(day)
        return MacroBreakdown(
            day=record.day,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
        )

    def derive_running_totals(self) -> RunningTotals:
        """Totals across all logged days."""
        return RunningTotals(
            days=len(self._days),
            calories=sum(record.total for record in self._days),
            protein=sum(record.protein for record in self._days),
            carbs=sum(record.carbs for record in self._days),
            fat=sum(record.fat for record in self._days),
        )

    def _get_day(self, day: int) -> DayRecord:
        if not 1 <= day <= len(self._days):
            raise DayNotFoundError(day)
        return self._days[day - 1]
