"""API routes."""

from . import meal_plans, static

__all__ = ["meal_plans", "static"]
