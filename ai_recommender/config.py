"""
Configuration for the AI recommender.

Settings are read once at startup from the environment (a ``.env`` file is
honored via python-dotenv). The service credential is never hard-coded:
``load_settings`` raises ``ConfigurationError`` when it is absent.

Environment variables:
    LLM_PROVIDER            gemini (default) | openrouter
    GEMINI_API_KEY          required for provider "gemini"
    OPENROUTER_API_KEY      required for provider "openrouter"
    GEMINI_MODEL            default gemini-1.5-pro-latest
    GEMINI_API_BASE         default https://generativelanguage.googleapis.com/v1beta/models
    OPENROUTER_MODEL        default google/gemini-2.5-flash
    LLM_TEMPERATURE         default 0.7
    LLM_TOP_K               default 40
    LLM_TOP_P               default 0.95
    LLM_MAX_OUTPUT_TOKENS   default 2048
    LLM_MAX_RETRIES         default 2
    LLM_RETRY_DELAY         default 1.0 (seconds)
    LLM_REQUEST_TIMEOUT     default 60 (seconds)
"""

import math
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError


# ============================================================================
# Defaults
# ============================================================================

PROVIDER_GEMINI = "gemini"
PROVIDER_OPENROUTER = "openrouter"
SUPPORTED_PROVIDERS = (PROVIDER_GEMINI, PROVIDER_OPENROUTER)

DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_GEMINI_MODEL = "gemini-1.5-pro-latest"
DEFAULT_OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_OPENROUTER_MODEL = "google/gemini-2.5-flash"

DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_K = 40
DEFAULT_TOP_P = 0.95
DEFAULT_MAX_OUTPUT_TOKENS = 2048

DEFAULT_MAX_RETRIES = 2
DEFAULT_RETRY_DELAY = 1.0  # seconds
DEFAULT_REQUEST_TIMEOUT = 60.0  # seconds


@dataclass(frozen=True)
class GenerationConfig:
    """Bounded sampling parameters sent with every request."""
    temperature: float = DEFAULT_TEMPERATURE
    top_k: int = DEFAULT_TOP_K
    top_p: float = DEFAULT_TOP_P
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS

    def to_gemini(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


@dataclass(frozen=True)
class RecommenderSettings:
    """Process-wide settings for the AI recommendation path."""
    api_key: str = field(repr=False)
    provider: str = PROVIDER_GEMINI
    model: str = DEFAULT_GEMINI_MODEL
    api_base: str = DEFAULT_GEMINI_API_BASE
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def with_overrides(self, **changes: Any) -> "RecommenderSettings":
        """Copy with selected fields replaced (None values are ignored)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _read_number(env: Mapping[str, str], name: str, default, cast, minimum=None, maximum=None):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {raw!r}")
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigurationError(f"{name} must be <= {maximum}, got {value}")
    return value


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> RecommenderSettings:
    """Build settings from environment variables.

    Args:
        env: Mapping to read instead of ``os.environ`` (used by tests)
        use_dotenv: Load a ``.env`` file into ``os.environ`` first

    Raises:
        ConfigurationError: If the provider is unknown, its API key is
            missing, or a numeric variable is malformed or out of range
    """
    if env is None:
        if use_dotenv:
            load_dotenv()
        env = os.environ

    provider = (env.get("LLM_PROVIDER") or PROVIDER_GEMINI).strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"LLM_PROVIDER must be one of {', '.join(SUPPORTED_PROVIDERS)}, got {provider!r}"
        )

    if provider == PROVIDER_GEMINI:
        key_name = "GEMINI_API_KEY"
        model = env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL
        api_base = env.get("GEMINI_API_BASE") or DEFAULT_GEMINI_API_BASE
    else:
        key_name = "OPENROUTER_API_KEY"
        model = env.get("OPENROUTER_MODEL") or DEFAULT_OPENROUTER_MODEL
        api_base = env.get("OPENROUTER_BASE_URL") or DEFAULT_OPENROUTER_BASE_URL

    api_key = (env.get(key_name) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{key_name} is required for provider '{provider}'")

    generation = GenerationConfig(
        temperature=_read_number(env, "LLM_TEMPERATURE", DEFAULT_TEMPERATURE, float, 0.0, 2.0),
        top_k=_read_number(env, "LLM_TOP_K", DEFAULT_TOP_K, int, 1),
        top_p=_read_number(env, "LLM_TOP_P", DEFAULT_TOP_P, float, 0.0, 1.0),
        max_output_tokens=_read_number(
            env, "LLM_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS, int, 1
        ),
    )

    return RecommenderSettings(
        api_key=api_key,
        provider=provider,
        model=model,
        api_base=api_base.rstrip("/"),
        generation=generation,
        max_retries=_read_number(env, "LLM_MAX_RETRIES", DEFAULT_MAX_RETRIES, int, 0, 10),
        retry_delay=_read_number(env, "LLM_RETRY_DELAY", DEFAULT_RETRY_DELAY, float, 0.0),
        request_timeout=_read_number(
            env, "LLM_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float, 1.0
        ),
    )
