"""
AI Recommender

Orchestrates the AI path: build the prompt, make one (retried) call to the
generative-text service, validate the reply, and on any failure return a
deterministic fallback built from the head of the catalog.

``recommend`` never raises for service or parsing problems. Whether a result
came from the model or from the fallback is reported through the optional
``on_outcome`` hook and the log, not through the return value.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from internship_core import InternshipRecord, QuestionnaireProfile, Recommendation
from internship_core.constants import (
    DEFAULT_PROMPT_CATALOG_LIMIT,
    DEFAULT_RECOMMENDATION_COUNT,
    FALLBACK_CAREER_ALIGNMENT,
    FALLBACK_KEY_BENEFITS,
    FALLBACK_ORGANIZATION,
    FALLBACK_REASONING,
    FALLBACK_SCORES,
    FALLBACK_SKILLS_TO_GAIN,
    FALLBACK_TITLE,
)

from .config import RecommenderSettings, load_settings
from .errors import ParseError, RecommenderError
from .llm_client import BaseLLMClient, create_client
from .prompt_builder import build_prompt
from .response_validator import validate_payload


logger = logging.getLogger(__name__)

SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"
SOURCE_EMPTY = "empty"


@dataclass(frozen=True)
class RecommendationOutcome:
    """What happened during one ``recommend`` call, for observability hooks."""
    source: str                         # ai | fallback | empty
    count: int
    provider: str = ""
    error: str = ""                     # failure that triggered the fallback
    elapsed_seconds: float = 0.0
    attempts: int = 0                   # outbound requests, retries included

    @property
    def degraded(self) -> bool:
        return self.source == SOURCE_FALLBACK


OutcomeHook = Callable[[RecommendationOutcome], None]


def build_fallback_recommendations(
    catalog: Sequence[InternshipRecord],
    limit: int = DEFAULT_RECOMMENDATION_COUNT,
) -> List[Recommendation]:
    """Generic recommendations for the first records of the catalog.

    Scores follow the fixed sequence 75, 70, 65, 60, 55 in catalog order.
    No network I/O.
    """
    limit = min(limit, len(FALLBACK_SCORES))
    return [
        Recommendation(
            title=record.title or FALLBACK_TITLE,
            organization=record.organization or FALLBACK_ORGANIZATION,
            match_score=FALLBACK_SCORES[i],
            reasoning=FALLBACK_REASONING,
            key_benefits=list(FALLBACK_KEY_BENEFITS),
            skills_to_gain=list(FALLBACK_SKILLS_TO_GAIN),
            career_alignment=FALLBACK_CAREER_ALIGNMENT,
        )
        for i, record in enumerate(list(catalog)[:limit])
    ]


class AIRecommender:
    """Questionnaire-driven recommender backed by a generative-text service.

    Example:
        recommender = AIRecommender.from_env()
        recs = recommender.recommend(profile, catalog)
        for r in recs:
            print(f"{r.match_score:3d}  {r.title} @ {r.organization}")
    """

    def __init__(
        self,
        client: Optional[BaseLLMClient] = None,
        catalog_limit: int = DEFAULT_PROMPT_CATALOG_LIMIT,
        top_n: int = DEFAULT_RECOMMENDATION_COUNT,
        on_outcome: Optional[OutcomeHook] = None,
    ):
        """Initialize the recommender.

        Args:
            client: Generative-text client; None means fallback only
                    (no network calls at all)
            catalog_limit: Maximum catalog records included in the prompt
            top_n: Number of recommendations requested / produced by fallback
            on_outcome: Called once per ``recommend`` with its outcome
        """
        self.client = client
        self.catalog_limit = catalog_limit
        self.top_n = top_n
        self.on_outcome = on_outcome

    @classmethod
    def from_env(
        cls,
        settings: Optional[RecommenderSettings] = None,
        **kwargs,
    ) -> "AIRecommender":
        """Build a recommender from environment configuration.

        Raises:
            ConfigurationError: If the credential is missing (fail fast at startup)
        """
        settings = settings or load_settings()
        return cls(client=create_client(settings), **kwargs)

    @property
    def provider(self) -> str:
        return self.client.provider if self.client else ""

    def _notify(self, outcome: RecommendationOutcome) -> None:
        if self.on_outcome is None:
            return
        try:
            self.on_outcome(outcome)
        except Exception as e:
            logger.error(f"Outcome hook raised {type(e).__name__}: {e}")

    def _ask_model(
        self,
        profile: QuestionnaireProfile,
        catalog: Sequence[InternshipRecord],
    ) -> Tuple[List[Recommendation], int]:
        prompt = build_prompt(profile, catalog, self.catalog_limit, self.top_n)
        payload = self.client.generate(prompt)
        try:
            recommendations = validate_payload(payload)
            if not recommendations:
                raise ParseError("Model returned an empty recommendation list")
        except ParseError as e:
            e.attempts = payload.attempts
            raise
        return recommendations, payload.attempts

    def recommend(
        self,
        profile: QuestionnaireProfile,
        catalog: Sequence[InternshipRecord],
    ) -> List[Recommendation]:
        """Recommend internships for a questionnaire profile.

        Returns the model's validated list in the model's own order, or the
        fallback list when any step fails. Returns [] for an empty catalog
        without calling the service.
        """
        start = time.monotonic()

        if not catalog:
            self._notify(RecommendationOutcome(source=SOURCE_EMPTY, count=0, provider=self.provider))
            return []

        missing = profile.missing_answers()
        if missing:
            logger.info(f"Questionnaire has unanswered questions: {', '.join(missing)}")

        error = ""
        attempts = 0
        if self.client is None:
            error = "no generative-text client configured"
        else:
            try:
                recommendations, attempts = self._ask_model(profile, catalog)
            except RecommenderError as e:
                error = f"{type(e).__name__}: {e}"
                attempts = e.attempts
            except Exception as e:
                # Anything the client lets escape is a transport failure here
                error = f"Unexpected {type(e).__name__}: {e}"
                logger.exception("Generative-text call raised an unexpected error")
            else:
                self._notify(RecommendationOutcome(
                    source=SOURCE_AI,
                    count=len(recommendations),
                    provider=self.provider,
                    elapsed_seconds=time.monotonic() - start,
                    attempts=attempts,
                ))
                return recommendations

        logger.warning(f"AI recommendations unavailable, using fallback ({error})")
        fallback = build_fallback_recommendations(catalog, self.top_n)
        self._notify(RecommendationOutcome(
            source=SOURCE_FALLBACK,
            count=len(fallback),
            provider=self.provider,
            error=error,
            elapsed_seconds=time.monotonic() - start,
            attempts=attempts,
        ))
        return fallback

    def recommend_batch(
        self,
        profiles: Sequence[QuestionnaireProfile],
        catalog: Sequence[InternshipRecord],
        show_progress: bool = True,
        delay_seconds: float = 0.0,
    ) -> List[List[Recommendation]]:
        """Recommend for several profiles, one request at a time.

        Args:
            profiles: Questionnaire profiles to process
            catalog: Shared catalog snapshot
            show_progress: Whether to show a progress bar
            delay_seconds: Pause between requests (rate limiting)

        Returns:
            One recommendation list per profile, in input order
        """
        iterator = profiles
        if show_progress:
            iterator = tqdm(profiles, desc=f"Recommending ({self.provider or 'fallback'})")

        results = []
        for i, profile in enumerate(iterator):
            if i > 0 and delay_seconds > 0:
                time.sleep(delay_seconds)
            results.append(self.recommend(profile, catalog))
        return results
