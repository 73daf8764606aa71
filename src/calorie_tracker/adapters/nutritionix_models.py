"""Pydantic models for Nutritionix response payloads."""

from pydantic import BaseModel, ConfigDict


class NutritionixFood(BaseModel):
    """One food entry of a natural nutrients response."""

    model_config = ConfigDict(extra="ignore")

    food_name: str
    nf_calories: float
    nf_protein: float | None = None
    nf_total_carbohydrate: float | None = None
    nf_total_fat: float | None = None
    serving_qty: float = 1
    serving_unit: str = ""


class NutritionixNutrientsResponse(BaseModel):
    """Natural nutrients response envelope."""

    model_config = ConfigDict(extra="ignore")

    foods: list[NutritionixFood] | None = None
