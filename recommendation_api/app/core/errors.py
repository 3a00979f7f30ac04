"""
Domain errors raised by the service layer.

Endpoints translate these into HTTP status codes: ``ConflictError``
becomes 409 and ``NotFoundError`` becomes 404.  Malformed input never
reaches the service; pydantic rejects it first with a 422.
"""


class RecommendationError(Exception):
    """Base class for recommendation domain errors."""


class ConflictError(RecommendationError):
    """A recommendation with the same name already exists."""


class NotFoundError(RecommendationError):
    """No recommendation matches the request."""
