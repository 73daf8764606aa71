"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from calorie_tracker.adapters.nutritionix_client import NutritionixClient
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.lookup import LookupService
from calorie_tracker.services.storage import KeyValueStore
from calorie_tracker.services.tracker import TrackerService


def egg_payload() -> dict[str, object]:
    return {
        "foods": [
            {
                "food_name": "egg",
                "nf_calories": 140,
                "nf_protein": 12,
                "nf_total_carbohydrate": 2,
                "nf_total_fat": 10,
                "serving_qty": 2,
                "serving_unit": "large",
            }
        ]
    }


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client returning a fixed payload or raising."""

    payload: dict[str, object] = field(default_factory=egg_payload)
    error: Exception | None = None
    gate: asyncio.Event | None = None
    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        nutritionix_app_id="app-id",
        nutritionix_app_key="app-key",
        data_file=tmp_path / "storage.json",
    )


@pytest.fixture
def nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def tracker(
    nutritionix_client: FakeNutritionixClient, store: InMemoryKeyValueStore
) -> TrackerService:
    return TrackerService(
        lookup_service=LookupService(nutritionix_client),
        store=store,
    )


@pytest.fixture
def container(settings: Settings, tracker: TrackerService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        tracker_service=tracker,
        close_resources=close_resources,
    )
