"\"\"\"Error taxonomy surfaced by the recommendation pipeline.\"\"\""

from __future__ import annotations


class RecommendationError(Exception):
    """Base class for errors that terminate a recommendation request."""

    status_code = 500
    default_message = "Failed to generate recommendations"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class UserNotFound(RecommendationError):
    """No user profile exists for the requested email."""

    status_code = 404
    default_message = "User not found"

    def __init__(self, email: str):
        super().__init__(f"User not found: {email!r}")
        self.email = email


class UpstreamError(RecommendationError):
    """Network, timeout or non-2xx failure talking to the inference service."""

    status_code = 502
    default_message = "Inference service request failed"


class RateLimited(RecommendationError):
    """The inference service explicitly throttled the request."""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class ParseError(RecommendationError):
    """Generated text did not carry a decodable match payload."""

    status_code = 500
    default_message = "Failed to parse AI response"


class MissingCredentials(ValueError):
    """Raised at construction time when the inference API key is absent."""


__all__ = [
    "RecommendationError",
    "UserNotFound",
    "UpstreamError",
    "RateLimited",
    "ParseError",
    "MissingCredentials",
]
