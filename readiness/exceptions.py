"""Exceptions raised at the edges of the scoring engine.

Scoring itself never raises for well-formed input; these cover payload
validation done before a ``PageData`` exists.
"""

from typing import Any


class ReadinessError(Exception):
    """Base exception for the readiness engine."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable error body."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class PageDataValidationError(ReadinessError):
    """A crawler payload could not be turned into PageData."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(
            message=message,
            code="invalid_page_data",
            details={"errors": errors or []},
        )
