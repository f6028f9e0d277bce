from __future__ import annotations

from openai import OpenAI

from .config import get_settings


def get_client() -> OpenAI:
    settings = get_settings()
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY is not configured in .env")
    return OpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout_s)


def generate_meal_plan_markdown(prompt: str) -> str:
    """
    Ask the chat model for a meal plan in the markdown format of `prompts.py`.

    OpenAI errors (auth, timeout, rate limit) propagate to the caller.
    An empty completion is returned as "".
    """
    settings = get_settings()
    client = get_client()

    completion = client.chat.completions.create(
        model=settings.openai_model_text,
        messages=[{"role": "user", "content": prompt}],
        temperature=settings.openai_temperature,
    )

    return completion.choices[0].message.content or ""
