"""
DietMind core.

Generation of personalized Indian meal plans and extraction of the LLM's
markdown answer into a typed `NormalizedPlan`:
- Domain models (DietaryProfile, NormalizedPlan, DishEntry)
- Prompt building and LLM client
- Resilient markdown scanner (`plan_parser.extract`)
- Engine (pipeline orchestrator)
"""

from .domain_models import DietaryProfile, DishEntry, NormalizedPlan
from .plan_parser import extract

__all__ = ["DietaryProfile", "DishEntry", "NormalizedPlan", "extract"]
