import pytest

from dietmind_core.domain_models import DietaryProfile, NormalizedPlan
from dietmind_core.engine import build_response_payload, run_meal_plan_pipeline
from dietmind_core.prompts import build_meal_plan_prompt


GENERATED = """Here is your plan.

## Breakfast
- **Dish 1**: Vegetable Upma
  - Rich in fiber
## Lunch
- **Dish 1**: Chole with Brown Rice
  - Plant protein
## Dinner
- **Dish 1**: Lauki Sabzi with Roti
  - Light
## Recommended Foods
- Almonds
## Foods to Avoid
- Fried pakoras
"""


@pytest.fixture
def profile():
    return DietaryProfile(
        dietary_preference="vegetarian",
        allergies=["peanuts"],
        age_stage="adult",
        medical_conditions=[],
        activity_level="moderate",
    )


def test_pipeline_extracts_generated_markdown(profile):
    prompts = []

    def fake_generate(prompt: str) -> str:
        prompts.append(prompt)
        return GENERATED

    result = run_meal_plan_pipeline(profile=profile, generate=fake_generate)

    assert prompts == [build_meal_plan_prompt(profile)]
    assert result["markdown"] == GENERATED
    assert [d.name for d in result["plan"].lunch] == ["Chole with Brown Rice"]
    assert result["payload"]["avoid"] == ["Fried pakoras"]
    assert "raw" not in result["payload"]


def test_pipeline_falls_back_to_raw_when_nothing_is_recognized(profile):
    answer = "I'm sorry, I can't help with that."
    result = run_meal_plan_pipeline(profile=profile, generate=lambda prompt: answer)

    assert result["plan"].is_empty()
    assert result["payload"] == {
        "breakfast": [],
        "lunch": [],
        "dinner": [],
        "recommended": [],
        "avoid": [],
        "raw": answer,
    }


def test_pipeline_propagates_generation_errors(profile):
    def failing(prompt: str) -> str:
        raise TimeoutError("upstream timeout")

    with pytest.raises(TimeoutError):
        run_meal_plan_pipeline(profile=profile, generate=failing)


def test_partial_plan_has_no_raw():
    plan = NormalizedPlan(avoid=["Soda"])
    payload = build_response_payload(plan, "## Foods to Avoid\n- Soda")
    assert payload["avoid"] == ["Soda"]
    assert "raw" not in payload
