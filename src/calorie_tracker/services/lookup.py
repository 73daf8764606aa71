"""Nutrition lookup service integrating Nutritionix."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from calorie_tracker.adapters.nutritionix_client import NutritionixClient
from calorie_tracker.adapters.nutritionix_models import (
    NutritionixFood,
    NutritionixNutrientsResponse,
)
from calorie_tracker.domain.errors import LookupFailedError, NoDataFoundError
from calorie_tracker.domain.tracker import FoodItem

_logger = logging.getLogger(__name__)


@dataclass
class LookupService:
    """Single-attempt food lookups against Nutritionix."""

    client: NutritionixClient

    async def lookup(self, query: str) -> list[FoodItem]:
        """Return the foods matched by a free-text description.

        Raises NoDataFoundError when the API answers with no foods and
        LookupFailedError when the request or its payload is unusable.
        """
        try:
            payload = await self.client.natural_nutrients(query)
            response = NutritionixNutrientsResponse.model_validate(payload)
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            _logger.exception(
                "Nutrition lookup failed (query=%s, status=%s)",
                query,
                _status_code_from_exception(exc),
            )
            raise LookupFailedError(query, str(exc)) from exc

        if not response.foods:
            _logger.info("Nutrition lookup returned no foods: query=%s", query)
            raise NoDataFoundError(query)
        return [_to_food_item(food) for food in response.foods]


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _to_food_item(food: NutritionixFood) -> FoodItem:
    return FoodItem(
        name=food.food_name,
        calories=food.nf_calories,
        protein=food.nf_protein or 0.0,
        carbs=food.nf_total_carbohydrate or 0.0,
        fat=food.nf_total_fat or 0.0,
        serving_qty=food.serving_qty,
        serving_unit=food.serving_unit,
    )
