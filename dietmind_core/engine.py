from __future__ import annotations

"""
dietmind_core.engine
====================

High-level orchestrator of the meal plan pipeline.

This module exposes a stable **internal API** to run the whole flow
(profile → prompt → LLM → extract → payload) without caring about HTTP or
CLI details. Both `api/` and `cli.py` call into it.
"""

import logging
from typing import Any, Callable, Dict, TypedDict

from .domain_models import DietaryProfile, NormalizedPlan
from .llm_client import generate_meal_plan_markdown
from .plan_parser import extract
from .prompts import build_meal_plan_prompt

logger = logging.getLogger(__name__)


class MealPlanRunResult(TypedDict):
    """
    Result of a full pipeline run.
    """

    markdown: str
    """Raw markdown returned by the LLM."""

    plan: NormalizedPlan
    """Extracted plan (typed source of truth)."""

    payload: Dict[str, Any]
    """Serializable response, see `build_response_payload`."""


def build_response_payload(plan: NormalizedPlan, markdown: str) -> Dict[str, Any]:
    """
    Serialize a plan for clients, applying the empty-plan fallback.

    The five fields are always present. When nothing at all was recognized,
    the payload also carries `raw` with the unparsed document so the client
    can show it instead of an empty plan.
    """
    payload = plan.to_dict()
    if plan.is_empty():
        payload["raw"] = markdown
    return payload


def run_meal_plan_pipeline(
    *,
    profile: DietaryProfile,
    generate: Callable[[str], str] | None = None,
) -> MealPlanRunResult:
    """
    Run the meal plan pipeline for a dietary profile.

    Flow:
    -----
    1) `build_meal_plan_prompt(profile)`
    2) `generate(prompt)` → markdown (defaults to `generate_meal_plan_markdown`)
    3) `extract(markdown)` → `NormalizedPlan`
    4) `build_response_payload(plan, markdown)`

    Errors from the generation call propagate; extraction never fails.

    Args:
        profile: Dietary profile of the user.
        generate: Optional replacement for the LLM call (tests, offline runs).
    """
    generate = generate or generate_meal_plan_markdown

    prompt = build_meal_plan_prompt(profile)
    markdown = generate(prompt)

    plan = extract(markdown)
    if plan.is_empty():
        logger.warning("No sections recognized in generated plan (%d chars)", len(markdown or ""))

    return MealPlanRunResult(
        markdown=markdown,
        plan=plan,
        payload=build_response_payload(plan, markdown),
    )
