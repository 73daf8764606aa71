"""Pydantic request and response models for the tracker API."""

from pydantic import BaseModel

from calorie_tracker.domain.tracker import (
    ChartPoint,
    DayRecord,
    MacroBreakdown,
    RunningTotals,
)


class RecordDayRequest(BaseModel):
    """Free-text food description to log."""

    food: str


class FoodItemOut(BaseModel):
    """Food item as returned by the API."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_qty: float
    serving_unit: str


class DayRecordOut(BaseModel):
    """Day record as returned by the API."""

    day: int
    total: float
    protein: float
    carbs: float
    fat: float
    items: list[FoodItemOut]

    @classmethod
    def from_record(cls, record: DayRecord) -> "DayRecordOut":
        return cls(
            day=record.day,
            total=record.total,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
            items=[
                FoodItemOut(
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


class RunningTotalsOut(BaseModel):
    """Totals across all logged days."""

    days: int
    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_totals(cls, totals: RunningTotals) -> "RunningTotalsOut":
        return cls(
            days=totals.days,
            calories=totals.calories,
            protein=totals.protein,
            carbs=totals.carbs,
            fat=totals.fat,
        )


class TrackerStateOut(BaseModel):
    """Full tracker read model for listing."""

    days: list[DayRecordOut]
    next_day: int
    in_flight: bool
    expanded_day: int | None
    totals: RunningTotalsOut


class ExpandedDayOut(BaseModel):
    """Result of toggling a day in the log."""

    expanded_day: int | None


class ClearedOut(BaseModel):
    """Result of a clear-all request."""

    cleared: bool


class SeriesOut(BaseModel):
    """Chart series as parallel label and value lists."""

    labels: list[str]
    values: list[float]

    @classmethod
    def from_points(cls, points: list[ChartPoint]) -> "SeriesOut":
        return cls(
            labels=[point.label for point in points],
            values=[point.value for point in points],
        )

    @classmethod
    def from_breakdown(cls, breakdown: MacroBreakdown) -> "SeriesOut":
        series = breakdown.as_series()
        return cls(
            labels=[label for label, _ in series],
            values=[value for _, value in series],
        )
