"""
Request/response models for the API.

These models define the shape of HTTP requests, validating types
before handing values to the core.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dietmind_core.domain_models import DietaryProfile


class MealPlanRequest(BaseModel):
    """
    Request to generate a meal plan.

    Field names follow the frontend (camelCase). Snake case is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    dietary_preference: str = Field(
        default="",
        alias="dietaryPreference",
        description="Dietary preference (e.g. vegetarian, vegan)",
    )
    allergies: List[str] = Field(default_factory=list, description="Known allergies")
    age_stage: str = Field(default="", alias="ageStage", description="Age stage (e.g. adult, senior)")
    medical_conditions: List[str] = Field(
        default_factory=list,
        alias="medicalConditions",
        description="Known medical conditions",
    )
    activity_level: str = Field(
        default="",
        alias="activityLevel",
        description="Activity level (e.g. sedentary, active)",
    )

    def to_profile(self) -> DietaryProfile:
        return DietaryProfile(
            dietary_preference=self.dietary_preference,
            allergies=list(self.allergies),
            age_stage=self.age_stage,
            medical_conditions=list(self.medical_conditions),
            activity_level=self.activity_level,
        )


class DishResponse(BaseModel):
    """A dish and its benefits."""

    dish: str = Field(..., description="Dish name")
    benefits: List[str] = Field(default_factory=list, description="Health benefits")


class MealPlanResponse(BaseModel):
    """
    Normalized meal plan.

    The five sections are always present (possibly empty). `raw` carries the
    unparsed document only when nothing could be extracted.
    """

    breakfast: List[DishResponse] = Field(default_factory=list)
    lunch: List[DishResponse] = Field(default_factory=list)
    dinner: List[DishResponse] = Field(default_factory=list)
    recommended: List[str] = Field(default_factory=list)
    avoid: List[str] = Field(default_factory=list)
    raw: Optional[str] = Field(
        default=None,
        description="Raw LLM answer, set only when no section was recognized",
    )


class HealthResponse(BaseModel):
    status: str
    message: str
