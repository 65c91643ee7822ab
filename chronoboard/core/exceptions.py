# File: chronoboard/core/exceptions.py

"""
Application exceptions.

Services raise these instead of ``HTTPException`` so they stay usable from
the CLI. ``chronoboard.main`` turns them into JSON for API paths and into
the HTML error page for everything else.
"""

from typing import Any, Dict, Optional


class ChronoBoardError(Exception):
    """Base exception for all ChronoBoard errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            data["details"] = self.details
        return data


class AuthenticationError(ChronoBoardError):
    """Credentials missing, wrong, or expired."""

    status_code = 401

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message, code="AUTH_FAILED")


class AuthorizationError(ChronoBoardError):
    """Authenticated, but the role lacks the permission."""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


class CsrfError(ChronoBoardError):
    status_code = 400

    def __init__(self, message: str = "Unable to verify your data submission."):
        super().__init__(message, code="CSRF_FAILED")


class NotFoundError(ChronoBoardError):
    status_code = 404

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found" if identifier is None else f"{resource} {identifier} not found"
        super().__init__(message, code="NOT_FOUND", details={"resource": resource})


class ConflictError(ChronoBoardError):
    """The change would break a uniqueness or consistency rule."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class PartialNotFoundError(ChronoBoardError):
    """A view asked for a partial that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown view partial: {name}", code="PARTIAL_NOT_FOUND")
