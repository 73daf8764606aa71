"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_tracker.adapters.json_file_store import JsonFileKeyValueStore
from calorie_tracker.adapters.nutritionix_client import HttpxNutritionixClient
from calorie_tracker.config import Settings
from calorie_tracker.services.lookup import LookupService
from calorie_tracker.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker_service: TrackerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nutritionix_app_id,
        app_key=resolved_settings.nutritionix_app_key,
        base_url=resolved_settings.nutritionix_base_url,
        timeout_seconds=resolved_settings.nutritionix_timeout_seconds,
    )
    tracker_service = TrackerService(
        lookup_service=LookupService(nutritionix_client),
        store=JsonFileKeyValueStore(resolved_settings.data_file),
        storage_key=resolved_settings.storage_key,
    )

    async def close_resources() -> None:
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
