"""
FastAPI dependencies.

Kept separate so tests can swap them with `app.dependency_overrides`
(e.g. replace the LLM call with a canned document).
"""

from typing import Callable

from dietmind_core.llm_client import generate_meal_plan_markdown


def get_meal_plan_generator() -> Callable[[str], str]:
    """
    Dependency returning the function that turns a prompt into markdown.
    """
    return generate_meal_plan_markdown
