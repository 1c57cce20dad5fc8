"""
Generative-text clients

Two interchangeable backends, selected by ``RecommenderSettings.provider``:

- ``GeminiClient``: direct REST call to the ``generateContent`` endpoint
  via requests
- ``OpenRouterClient``: OpenAI-compatible chat completion via the openai
  SDK, pointed at OpenRouter

Both send the prompt as the only content, carry the bounded generation
config, retry transport failures with linear backoff, and return the
completion as an ``UntrustedPayload`` for the response validator.
"""

import logging
import time
from typing import Any, Dict, Optional, Tuple

import requests
from openai import APIConnectionError, APIStatusError, APITimeoutError, OpenAI

from .config import PROVIDER_GEMINI, PROVIDER_OPENROUTER, RecommenderSettings
from .errors import ConfigurationError, EnvelopeError, TransportError
from .response_validator import UntrustedPayload


logger = logging.getLogger(__name__)

# 4xx statuses worth another attempt; every 5xx is retried
RETRYABLE_STATUS_CODES = {408, 429}


def is_retryable(error: TransportError) -> bool:
    """Network errors, timeouts, 408/429 and 5xx are retried; other 4xx are not."""
    if error.status_code is None:
        return True
    return error.status_code in RETRYABLE_STATUS_CODES or error.status_code >= 500


class BaseLLMClient:
    """Shared retry loop for generative-text backends.

    Subclasses implement ``_send`` (one attempt, raising TransportError)
    and ``_extract_text`` (raising EnvelopeError).
    """

    provider = ""

    def __init__(self, settings: RecommenderSettings):
        self.settings = settings
        self.model = settings.model

    def _send(self, prompt: str) -> Any:
        raise NotImplementedError

    def _extract_text(self, response: Any) -> str:
        raise NotImplementedError

    def _send_with_retry(self, prompt: str) -> Tuple[Any, int]:
        """Send with retries; returns (response, attempts made)."""
        max_retries = self.settings.max_retries
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._send(prompt), attempt
            except EnvelopeError as e:
                e.attempts = attempt
                raise
            except TransportError as e:
                if attempt > max_retries or not is_retryable(e):
                    if attempt > 1:
                        raise TransportError(
                            f"{e} (after {attempt} attempts)",
                            status_code=e.status_code,
                            attempts=attempt,
                        ) from e
                    raise
                delay = self.settings.retry_delay * attempt
                logger.warning(
                    f"{self.provider} request failed ({e}); "
                    f"retry {attempt}/{max_retries} in {delay:.1f}s"
                )
                time.sleep(delay)

    def generate(self, prompt: str) -> UntrustedPayload:
        """Send one prompt and return the raw completion text.

        Raises:
            TransportError: Network failure or non-success status after retries
            EnvelopeError: Success response without completion text
        """
        response, attempts = self._send_with_retry(prompt)
        try:
            text = self._extract_text(response)
            if not text or not text.strip():
                raise EnvelopeError(f"No completion text in {self.provider} response")
        except EnvelopeError as e:
            e.attempts = attempts
            raise
        return UntrustedPayload(text=text, provider=self.provider, attempts=attempts)


class GeminiClient(BaseLLMClient):
    """Client for the Gemini ``generateContent`` REST endpoint.

    The API key travels in the ``x-goog-api-key`` header, never in the URL.

    Example:
        client = GeminiClient(load_settings())
        payload = client.generate("Recommend internships for ...")
    """

    provider = PROVIDER_GEMINI

    def __init__(
        self,
        settings: RecommenderSettings,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            settings: Provider settings
            session: Caller-owned session to reuse; module-level
                     ``requests.post`` is used when omitted
        """
        super().__init__(settings)
        self.session = session

    @property
    def endpoint(self) -> str:
        return f"{self.settings.api_base}/{self.model}:generateContent"

    def _build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.settings.generation.to_gemini(),
        }

    def _send(self, prompt: str) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.api_key,
        }
        try:
            post = self.session.post if self.session is not None else requests.post
            response = post(
                self.endpoint,
                headers=headers,
                json=self._build_payload(prompt),
                timeout=self.settings.request_timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"Gemini API error: {status}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise EnvelopeError(f"Gemini response is not JSON: {e}") from e

    def _extract_text(self, response: Dict[str, Any]) -> str:
        try:
            parts = response["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            raise EnvelopeError("No candidates in Gemini response") from None
        if not isinstance(parts, list):
            raise EnvelopeError("Malformed content parts in Gemini response")
        return "".join(
            part.get("text", "") for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )


class OpenRouterClient(BaseLLMClient):
    """Client for OpenRouter's OpenAI-compatible chat endpoint."""

    provider = PROVIDER_OPENROUTER

    def __init__(self, settings: RecommenderSettings, client: Optional[OpenAI] = None):
        super().__init__(settings)
        # Retries are handled by BaseLLMClient, not by the SDK
        self.client = client or OpenAI(
            base_url=settings.api_base,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )

    def _send(self, prompt: str) -> Any:
        generation = self.settings.generation
        try:
            return self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=generation.temperature,
                top_p=generation.top_p,
                max_tokens=generation.max_output_tokens,
                extra_body={"top_k": generation.top_k},
            )
        except APIStatusError as e:
            raise TransportError(
                f"OpenRouter API error: {e.status_code}", status_code=e.status_code
            ) from e
        except (APIConnectionError, APITimeoutError) as e:
            raise TransportError(f"OpenRouter request failed: {e}") from e

    def _extract_text(self, response: Any) -> str:
        choices = getattr(response, "choices", None)
        if not choices:
            raise EnvelopeError("No choices in OpenRouter response")
        return choices[0].message.content or ""


def create_client(settings: RecommenderSettings) -> BaseLLMClient:
    """Build the client for the configured provider."""
    if settings.provider == PROVIDER_GEMINI:
        return GeminiClient(settings)
    if settings.provider == PROVIDER_OPENROUTER:
        return OpenRouterClient(settings)
    raise ConfigurationError(f"Unsupported LLM provider: {settings.provider}")
