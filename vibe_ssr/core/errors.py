"""Error Hierarchy — typed, categorized exceptions for the demo service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookup misses are the only domain error; anything else surfaces as InternalError (500)
    - to_response() produces the JSON body the shell sends verbatim

Design Decisions:
    - Single hierarchy with VibeError base: one FastAPI handler catches all
    - UserNotFoundError keeps the flat {error, id} body that API clients already parse
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class VibeError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Lookup Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(VibeError):
    """Requested resource does not exist in its static table."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UserNotFoundError(ResourceNotFoundError):
    """User id absent from the user table. Echoes the id exactly as requested."""
    def __init__(self, user_id: str):
        super().__init__("User", user_id)
        self.code = "USER_NOT_FOUND"

    def to_response(self) -> dict:
        return {"error": "User not found", "id": self.resource_id}


# ─── Internal Errors (500) ──────────────────────────────────────

class InternalError(VibeError):
    """Body for unexpected failures; carries no detail from the original exception."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
