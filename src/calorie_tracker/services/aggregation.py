"""Aggregation of looked-up food items into day records."""

from collections.abc import Sequence

from calorie_tracker.domain.tracker import DayRecord, FoodItem


def build_day_record(items: Sequence[FoodItem], day: int) -> DayRecord:
    """Sum item calories and macros into a record for the given day.

    Sums are plain float additions in item order; rounding is left to
    whatever renders the record.
    """
    if not items:
        raise ValueError("A day record needs at least one food item")
    total = protein = carbs = fat = 0.0
    for item in items:
        total += item.calories
        protein += item.protein
        carbs += item.carbs
        fat += item.fat
    return DayRecord(
        day=day,
        total=total,
        protein=protein,
        carbs=carbs,
        fat=fat,
        items=tuple(items),
    )
