"""
AI Recommender Package

Questionnaire-driven internship recommendations from a generative-text
service, with strict response validation and a deterministic fallback:
- Prompt builder (profile + catalog -> instruction text)
- Gemini / OpenRouter clients with retry
- Response validator (untrusted text -> Recommendation list)
- AIRecommender orchestration + fallback
"""

from .config import GenerationConfig, RecommenderSettings, load_settings
from .errors import (
    RecommenderError,
    ConfigurationError,
    TransportError,
    EnvelopeError,
    ParseError,
)
from .prompt_builder import build_prompt
from .response_validator import UntrustedPayload, parse_recommendations, validate_payload
from .llm_client import GeminiClient, OpenRouterClient, create_client
from .recommender import (
    AIRecommender,
    RecommendationOutcome,
    build_fallback_recommendations,
)

__all__ = [
    # Config
    "GenerationConfig",
    "RecommenderSettings",
    "load_settings",
    # Errors
    "RecommenderError",
    "ConfigurationError",
    "TransportError",
    "EnvelopeError",
    "ParseError",
    # Core classes
    "build_prompt",
    "UntrustedPayload",
    "parse_recommendations",
    "validate_payload",
    "GeminiClient",
    "OpenRouterClient",
    "create_client",
    "AIRecommender",
    "RecommendationOutcome",
    "build_fallback_recommendations",
]
