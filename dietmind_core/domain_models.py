"""
dietmind_core.domain_models
===========================

Domain models (dataclasses) used across the pipeline.

This module defines the "neutral" data structures of the system:

- The user's dietary profile (`DietaryProfile`), input of the prompt builder.
- The normalized meal plan (`NormalizedPlan`) and its dishes (`DishEntry`),
  output of the document scanner.

Design principles
-----------------
- Dataclasses without heavy logic: this module does NOT talk to OpenAI or do IO.
- Every sequence field defaults to an empty list, never `None`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


# ============================================================
# Input: dietary profile
# ============================================================

@dataclass
class DietaryProfile:
    """
    Parameters describing the person the meal plan is generated for.

    Attributes:
        dietary_preference:
            Free text, e.g. "vegetarian", "vegan", "non-vegetarian".
        allergies:
            Known allergies. Empty list means none.
        age_stage:
            Free text, e.g. "adult", "senior", "teen".
        medical_conditions:
            Known conditions (e.g. "diabetes"). Empty list means none.
        activity_level:
            Free text, e.g. "sedentary", "moderate", "active".
    """
    dietary_preference: str = ""
    allergies: List[str] = field(default_factory=list)
    age_stage: str = ""
    medical_conditions: List[str] = field(default_factory=list)
    activity_level: str = ""


# ============================================================
# Output: normalized plan
# ============================================================

@dataclass
class DishEntry:
    """
    A named dish inside a meal section, with zero or more benefits.
    """
    name: str
    benefits: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"dish": self.name, "benefits": list(self.benefits)}


MEAL_FIELDS = ("breakfast", "lunch", "dinner")
LIST_FIELDS = ("recommended", "avoid")


@dataclass
class NormalizedPlan:
    """
    Structured meal plan extracted from a generated document.

    All five fields are always present. A section missing from the source
    document is an empty list.
    """
    breakfast: List[DishEntry] = field(default_factory=list)
    lunch: List[DishEntry] = field(default_factory=list)
    dinner: List[DishEntry] = field(default_factory=list)
    recommended: List[str] = field(default_factory=list)
    avoid: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when nothing at all was recognized."""
        return not any(getattr(self, name) for name in MEAL_FIELDS + LIST_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialized shape consumed by the frontend:
        `{breakfast, lunch, dinner, recommended, avoid}` with dishes as
        `{dish, benefits}`.
        """
        data: Dict[str, Any] = {}
        for name in MEAL_FIELDS:
            data[name] = [dish.to_dict() for dish in getattr(self, name)]
        for name in LIST_FIELDS:
            data[name] = list(getattr(self, name))
        return data
