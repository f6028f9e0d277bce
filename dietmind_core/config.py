# dietmind_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

"""
dietmind_core.config
====================

Centralized application configuration.

This module defines:
- The configuration structure (`Settings`)
- Loading of environment variables (.env)
- A single cached access point (`get_settings`)

Conventions
-----------
- Environment variables are loaded from a `.env` file when present.
- Defaults target local development.
- In production, values must come from the real environment (Docker, CI, etc.).

Important notes
---------------
- `load_dotenv()` runs at import time.
- A missing critical variable (e.g. the API key) does NOT fail here;
  the error is raised where the value is used.
"""

# Load environment variables from .env (if present)
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """
    Typed container for global configuration.

    Attributes
    ----------
    openai_api_key:
        OpenAI API key. Required for any LLM call.
    openai_model_text:
        Chat model used to generate the meal plan document.
    openai_temperature:
        Sampling temperature for the generation call.
    openai_timeout_s:
        Timeout (seconds) for the generation call.
    cors_origins:
        Origins allowed by the CORS middleware. `["*"]` allows any origin.
    static_dir:
        Directory with the built frontend. Served only if it exists.
    host, port:
        Bind address for `run_api.py`.
    environment, log_level:
        Runtime environment name and logging level name.
    """

    # OpenAI
    openai_api_key: str
    openai_model_text: str
    openai_temperature: float = 0.7
    openai_timeout_s: float = 60.0

    # HTTP
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    static_dir: str = "dist"
    host: str = "0.0.0.0"
    port: int = 5000

    # Runtime
    environment: str = "local"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Return a single cached `Settings` instance.

    Environment variables used
    --------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-4o-mini")
    - OPENAI_TEMPERATURE (default: 0.7)
    - OPENAI_TIMEOUT_S (default: 60)
    - CORS_ORIGINS (default: "*")
    - STATIC_DIR (default: "dist")
    - HOST / PORT (default: "0.0.0.0" / 5000)
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")

    Notes
    -----
    - If `OPENAI_API_KEY` is not defined we do NOT fail here.
      The error is raised when something tries to use OpenAI.
    - Tests that change the environment must call `get_settings.cache_clear()`.
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-4o-mini"),
        openai_temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        openai_timeout_s=float(os.getenv("OPENAI_TIMEOUT_S", "60")),

        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")) or ["*"],
        static_dir=os.getenv("STATIC_DIR", "dist"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),

        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
