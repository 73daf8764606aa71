"""Domain models for logged days and their read models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """One food entry as returned by the nutrition lookup."""

    name: str
    calories: float
    serving_qty: float
    serving_unit: str
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True)
class DayRecord:
    """All food submitted under a single day index with summed totals."""

    day: int
    total: float
    protein: float
    carbs: float
    fat: float
    items: tuple[FoodItem, ...]


@dataclass(frozen=True)
class ChartPoint:
    """One point of the calories-per-day line chart."""

    label: str
    value: float


@dataclass(frozen=True)
class MacroBreakdown:
    """Protein, carbs and fat totals of one day for a pie chart."""

    day: int
    protein: float
    carbs: float
    fat: float

    def as_series(self) -> list[tuple[str, float]]:
        """Return (label, value) pairs in a fixed order."""
        return [
            ("Protein", self.protein),
            ("Carbs", self.carbs),
            ("Fat", self.fat),
        ]


@dataclass(frozen=True)
class RunningTotals:
    """Totals across every logged day."""

    days: int
    calories: float
    protein: float
    carbs: float
    fat: float
