"""Day log endpoints backed by the tracker service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from calorie_tracker.api.schemas import (
    ClearedOut,
    DayRecordOut,
    ExpandedDayOut,
    RecordDayRequest,
    RunningTotalsOut,
    SeriesOut,
    TrackerStateOut,
)
from calorie_tracker.domain.errors import (
    DayNotFoundError,
    LookupFailedError,
    LookupInProgressError,
    NoDataFoundError,
)
from calorie_tracker.services.tracker import StaticConfirmation, TrackerService

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

NO_DATA_MESSAGE = "No nutrition data found for this food."
LOOKUP_FAILED_MESSAGE = "Something went wrong while fetching data."

router = APIRouter(tags=["days"])


def get_tracker(request: Request) -> TrackerService:
    """Return the tracker service from the app container."""
    container: AppContainer = request.app.state.container
    return container.tracker_service


@router.get("/days", response_model=TrackerStateOut)
async def list_days(tracker: TrackerService = Depends(get_tracker)) -> TrackerStateOut:
    """Return the logged days with running totals."""
    return TrackerStateOut(
        days=[DayRecordOut.from_record(record) for record in tracker.days],
        next_day=tracker.next_day,
        in_flight=tracker.in_flight,
        expanded_day=tracker.expanded_day,
        totals=RunningTotalsOut.from_totals(tracker.derive_running_totals()),
    )


@router.post(
    "/days", status_code=status.HTTP_201_CREATED, response_model=DayRecordOut
)
async def record_day(
    payload: RecordDayRequest, tracker: TrackerService = Depends(get_tracker)
) -> DayRecordOut | Response:
    """Look up a food description and log it as the next day."""
    try:
        record = await tracker.record_day(payload.food)
    except LookupInProgressError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    except NoDataFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_DATA_MESSAGE
        ) from exc
    except LookupFailedError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=LOOKUP_FAILED_MESSAGE
        ) from exc
    if record is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return DayRecordOut.from_record(record)


@router.post("/days/{day}/toggle", response_model=ExpandedDayOut)
async def toggle_day(
    day: int, tracker: TrackerService = Depends(get_tracker)
) -> ExpandedDayOut:
    """Expand or collapse one day in the log."""
    try:
        expanded = tracker.toggle_expand(day)
    except DayNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return ExpandedDayOut(expanded_day=expanded)


@router.delete("/days", response_model=ClearedOut)
async def clear_days(
    confirm: bool = False, tracker: TrackerService = Depends(get_tracker)
) -> ClearedOut:
    """Clear all logged days when the caller confirmed the prompt."""
    cleared = tracker.clear_all(StaticConfirmation(answer=confirm))
    return ClearedOut(cleared=cleared)


@router.get("/chart/calories", response_model=SeriesOut)
async def calories_chart(tracker: TrackerService = Depends(get_tracker)) -> SeriesOut:
    """Calories per day for the line chart."""
    return SeriesOut.from_points(tracker.derive_chart_series())


@router.get("/days/{day}/macros", response_model=SeriesOut)
async def day_macros(
    day: int, tracker: TrackerService = Depends(get_tracker)
) -> SeriesOut:
    """Macro split of one day for the pie chart."""
    try:
        breakdown = tracker.derive_macro_breakdown(day)
    except DayNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return SeriesOut.from_breakdown(breakdown)
