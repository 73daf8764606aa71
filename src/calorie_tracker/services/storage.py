"""Key-value storage interface and the persisted day-list format."""

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, Field, TypeAdapter

from calorie_tracker.domain.tracker import DayRecord, FoodItem
from calorie_tracker.services.aggregation import build_day_record


class KeyValueStore(Protocol):
    """Local string storage keyed by name."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    def remove_item(self, key: str) -> None:
        """Remove a value if present."""


class FoodItemSnapshot(BaseModel):
    """Persisted shape of a food item."""

    name: str
    calories: float
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    serving_qty: float
    serving_unit: str


class DayRecordSnapshot(BaseModel):
    """Persisted shape of a day record."""

    day: int = Field(ge=1)
    total: float
    protein: float
    carbs: float
    fat: float
    items: list[FoodItemSnapshot] = Field(min_length=1)


_DAY_LIST = TypeAdapter(list[DayRecordSnapshot])


def dump_days(days: Sequence[DayRecord]) -> str:
    """Serialize the ordered day list to JSON."""
    snapshots = [
        DayRecordSnapshot(
            day=record.day,
            total=record.total,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
            items=[
                FoodItemSnapshot(
                    name=item.name,
                    calories=item.calories,
                    protein=item.protein,
                    carbs=item.carbs,
                    fat=item.fat,
                    serving_qty=item.serving_qty,
                    serving_unit=item.serving_unit,
                )
                for item in record.items
            ],
        )
        for record in days
    ]
    return _DAY_LIST.dump_json(snapshots).decode()


def load_days(raw: str) -> list[DayRecord]:
    """Parse a stored day list, raising ValueError when it is malformed.

    Totals are recomputed from the stored items, and day indices must run
    1..N in list order.
    """
    snapshots = _DAY_LIST.validate_json(raw)
    days: list[DayRecord] = []
    for position, snapshot in enumerate(snapshots, start=1):
        if snapshot.day != position:
            raise ValueError(
                f"Expected day {position} at position {position}, got {snapshot.day}"
            )
        items = [
            FoodItem(
                name=item.name,
                calories=item.calories,
                protein=item.protein,
                carbs=item.carbs,
                fat=item.fat,
                serving_qty=item.serving_qty,
                serving_unit=item.serving_unit,
            )
            for item in snapshot.items
        ]
        days.append(build_day_record(items, snapshot.day))
    return days
