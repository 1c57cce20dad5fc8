"""Error taxonomy for the AI recommendation path."""

from typing import Optional


class RecommenderError(Exception):
    """Base class for failures inside the AI recommendation path."""

    # Outbound requests made before the failure surfaced
    attempts = 0


class ConfigurationError(RecommenderError, ValueError):
    """Required configuration is missing or invalid."""


class TransportError(RecommenderError):
    """The generative-text call failed at the network or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None, attempts: int = 1):
        super().__init__(message)
        self.status_code = status_code
        self.attempts = attempts


class EnvelopeError(RecommenderError):
    """The service answered successfully but carried no completion text."""


class ParseError(RecommenderError):
    """No well-formed recommendation array could be recovered from the reply."""
