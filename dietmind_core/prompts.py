# dietmind_core/prompts.py

"""
Prompts for meal plan generation.

The markdown format requested here is the input contract of
`plan_parser.extract`. Changing one without the other breaks extraction.
"""

from typing import Sequence

from .domain_models import DietaryProfile

MEAL_PLAN_FORMAT = """
## Breakfast
- **Dish 1**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3
- **Dish 2**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3

## Lunch
- **Dish 1**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3
- **Dish 2**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3

## Dinner
- **Dish 1**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3
- **Dish 2**: Dish Name
  - Benefit 1
  - Benefit 2
  - Benefit 3

## Recommended Foods
- Food 1
- Food 2
- Food 3

## Foods to Avoid
- Food 1
- Food 2
- Food 3
"""

MEAL_PLAN_PROMPT_EN = """
You are a nutrition expert. Based on the following parameters, generate a personalized Indian diet plan:

- Dietary Preference: {dietary_preference}
- Allergies: {allergies}
- Age Stage: {age_stage}
- Medical Conditions: {medical_conditions}
- Activity Level: {activity_level}

**Instructions:**
- For each meal (Breakfast, Lunch, Dinner), suggest 2 Indian dishes.
- For each dish, provide 3 health benefits (no preparation steps).
- All dishes must be Indian.
- Then, list 3 recommended foods and 3 foods to avoid.
- Respond strictly in the following markdown format:
{format}"""


def _join_or_none(values: Sequence[str]) -> str:
    cleaned = [v.strip() for v in values if v and v.strip()]
    return ", ".join(cleaned) if cleaned else "None"


def build_meal_plan_prompt(profile: DietaryProfile) -> str:
    """
    Render the user prompt for a dietary profile.

    Empty allergy / medical condition lists are rendered as "None".
    """
    return MEAL_PLAN_PROMPT_EN.format(
        dietary_preference=profile.dietary_preference.strip(),
        allergies=_join_or_none(profile.allergies),
        age_stage=profile.age_stage.strip(),
        medical_conditions=_join_or_none(profile.medical_conditions),
        activity_level=profile.activity_level.strip(),
        format=MEAL_PLAN_FORMAT,
    )
