"""
Meal plan generation endpoint.

- POST /api/generate-meal-plan: generate and normalize a meal plan
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from dietmind_core.engine import run_meal_plan_pipeline

from ..dependencies import get_meal_plan_generator
from ..models.requests import MealPlanRequest, MealPlanResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["meal-plans"])


@router.post(
    "/generate-meal-plan",
    response_model=MealPlanResponse,
    response_model_exclude_none=True,
)
def generate_meal_plan(
    request: MealPlanRequest,
    generate: Callable[[str], str] = Depends(get_meal_plan_generator),
):
    """
    Generate a personalized Indian meal plan for a dietary profile.

    Plain `def`: FastAPI runs it in the threadpool, off the event loop.

    Returns:
        The five plan sections. `raw` is included only when the LLM answer
        could not be parsed into any section.

    Raises:
        500: If the LLM call fails (missing API key, timeout, API error)
    """
    logger.info(
        "Generating meal plan (preference=%r, activity=%r)",
        request.dietary_preference,
        request.activity_level,
    )

    try:
        result = run_meal_plan_pipeline(profile=request.to_profile(), generate=generate)
    except Exception as e:
        logger.exception("Error generating meal plan")
        raise HTTPException(status_code=500, detail="Failed to generate meal plan") from e

    # `raw` is None unless the fallback applies; exclude_none drops it.
    return result["payload"]
