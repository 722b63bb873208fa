"""Domain errors raised by the content services and the authorization gate.

Each error carries the HTTP status it maps to. Anything that is not a
``PortfolioError`` is treated as an internal failure by the API layer.
"""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(PortfolioError):
    """Missing, invalid or expired session on a gated operation."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(PortfolioError):
    """Update or delete target does not exist."""

    status_code = 404


class ContentValidationError(PortfolioError):
    """Payload does not satisfy the entity's schema."""

    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []
