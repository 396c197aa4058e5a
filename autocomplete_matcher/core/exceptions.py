"""Exceptions raised by the matching pipeline."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(Enum):
    """Error classification types."""
    INVALID_CONFIG = "invalid_config"
    INVALID_QUERY = "invalid_query"
    UNKNOWN = "unknown"


class MatcherError(Exception):
    """Base exception for autocomplete matcher errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_type": self.error_type.value,
            "message": str(self),
            "details": self.details,
        }


class InvalidConfigError(MatcherError):
    """Search configuration is missing required options or has bad values."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, ErrorType.INVALID_CONFIG, details)
