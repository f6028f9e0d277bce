import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_meal_plan_generator
from api.main import create_app
from dietmind_core.config import Settings, get_settings


PLAN_MD = """## Breakfast
- **Dish 1**: Poha
  - High in iron
  - Light on stomach
## Recommended Foods
- Turmeric milk
"""

PROFILE_BODY = {
    "dietaryPreference": "vegetarian",
    "allergies": ["peanuts"],
    "ageStage": "adult",
    "medicalConditions": [],
    "activityLevel": "moderate",
}


def _settings(tmp_path, **overrides) -> Settings:
    values = dict(
        openai_api_key="",
        openai_model_text="gpt-4o-mini",
        static_dir=str(tmp_path / "no-build"),
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_client(tmp_path):
    def _make(generate=None, **overrides):
        app = create_app(_settings(tmp_path, **overrides))
        if generate is not None:
            app.dependency_overrides[get_meal_plan_generator] = lambda: generate
        return TestClient(app)

    return _make


def test_health(make_client):
    client = make_client()
    for path in ("/", "/health"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "DietMind backend is healthy"}


def test_generate_meal_plan(make_client):
    prompts = []

    def fake_generate(prompt: str) -> str:
        prompts.append(prompt)
        return PLAN_MD

    client = make_client(generate=fake_generate)
    response = client.post("/api/generate-meal-plan", json=PROFILE_BODY)

    assert response.status_code == 200
    assert response.json() == {
        "breakfast": [{"dish": "Poha", "benefits": ["High in iron", "Light on stomach"]}],
        "lunch": [],
        "dinner": [],
        "recommended": ["Turmeric milk"],
        "avoid": [],
    }
    assert len(prompts) == 1
    assert "- Allergies: peanuts" in prompts[0]
    assert "- Medical Conditions: None" in prompts[0]


def test_generate_response_is_validated_against_model(make_client):
    client = make_client(generate=lambda prompt: PLAN_MD)
    body = client.post("/api/generate-meal-plan", json=PROFILE_BODY).json()

    assert "raw" not in body
    assert set(body) == {"breakfast", "lunch", "dinner", "recommended", "avoid"}

    schema = client.get("/openapi.json").json()
    ref = schema["paths"]["/api/generate-meal-plan"]["post"]["responses"]["200"]["content"][
        "application/json"
    ]["schema"]["$ref"]
    assert ref.endswith("/MealPlanResponse")


def test_generate_accepts_snake_case_and_missing_fields(make_client):
    client = make_client(generate=lambda prompt: PLAN_MD)
    response = client.post("/api/generate-meal-plan", json={"dietary_preference": "vegan"})
    assert response.status_code == 200
    assert response.json()["recommended"] == ["Turmeric milk"]


def test_generate_returns_raw_when_unparseable(make_client):
    client = make_client(generate=lambda prompt: "Sorry, try again later.")
    response = client.post("/api/generate-meal-plan", json=PROFILE_BODY)

    assert response.status_code == 200
    body = response.json()
    assert body["raw"] == "Sorry, try again later."
    assert all(body[key] == [] for key in ("breakfast", "lunch", "dinner", "recommended", "avoid"))


def test_generate_failure_returns_500(make_client):
    def failing(prompt: str) -> str:
        raise RuntimeError("boom")

    client = make_client(generate=failing)
    response = client.post("/api/generate-meal-plan", json=PROFILE_BODY)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate meal plan"}


def test_missing_api_key_returns_500(make_client, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    get_settings.cache_clear()
    try:
        client = make_client()
        response = client.post("/api/generate-meal-plan", json=PROFILE_BODY)
    finally:
        get_settings.cache_clear()

    assert response.status_code == 500


def test_invalid_body_is_rejected(make_client):
    client = make_client(generate=lambda prompt: PLAN_MD)
    response = client.post("/api/generate-meal-plan", json={"allergies": "not-a-list"})
    assert response.status_code == 422


def test_cors_preflight(make_client):
    client = make_client(cors_origins=["http://localhost:5173"])
    response = client.options(
        "/api/generate-meal-plan",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_serves_frontend_build(make_client, tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>DietMind</html>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log('hi')", encoding="utf-8")

    client = make_client(generate=lambda prompt: PLAN_MD, static_dir=str(dist))

    assert "DietMind" in client.get("/").text
    assert "console.log" in client.get("/assets/app.js").text
    assert "DietMind" in client.get("/plans/today").text
    assert client.get("/health").json()["status"] == "ok"
    assert client.post("/api/generate-meal-plan", json=PROFILE_BODY).status_code == 200
