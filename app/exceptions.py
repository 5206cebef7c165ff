from typing import Any, Mapping, Optional


class FoodOrderError(Exception):
    """Base class for errors raised by the backend glue.

    Attributes:
        message: human-readable message (the backend message when wrapping a remote fault)
        details: optional mapping with extra context (backend error code, type, failed ids)
        code: optional machine-readable error code
    """

    default_message = "Backend operation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FoodOrderError):
    """Raised at startup when a required connection parameter is missing or invalid."""

    default_message = "Invalid configuration"


class AccountCreationError(FoodOrderError):
    """Raised when the backend rejects account or profile creation."""

    default_message = "Account creation failed"


class AuthenticationError(FoodOrderError):
    """Raised when credentials cannot be exchanged for a session."""

    default_message = "Authentication failed"


class NoActiveSessionError(FoodOrderError):
    """Raised when an operation needs a signed-in account and there is none."""

    default_message = "No active session"


class ProfileNotFoundError(FoodOrderError):
    """Raised when a signed-in account has no user profile document."""

    default_message = "User profile not found"


class QueryError(FoodOrderError):
    """Raised when listing or querying documents fails."""

    default_message = "Query failed"


class SeedError(FoodOrderError):
    """Raised when the seeding workflow aborts."""

    default_message = "Seeding failed"


class WipeError(SeedError):
    """Raised when one or more deletions of the wipe phase fail.

    Attributes:
        failures: the failed DeletionResult entries, one per record that was not deleted
    """

    default_message = "Wipe phase failed"

    def __init__(self, message: Optional[str] = None, failures=None, code: Optional[str] = None):
        self.failures = list(failures or [])
        details = {
            "failed": [
                {"target": f.target, "id": f.record_id, "error": str(f.error)}
                for f in self.failures
            ]
        }
        super().__init__(message, details=details, code=code)


def backend_details(exc: Exception) -> dict:
    """Extract code and type from an SDK exception for error details."""
    details: dict[str, Any] = {}
    code = getattr(exc, "code", None)
    if code is not None:
        details["backend_code"] = code
    error_type = getattr(exc, "type", None)
    if error_type:
        details["backend_type"] = error_type
    return details


def backend_message(exc: Exception) -> str:
    """Return the backend message of an SDK exception as-is."""
    return getattr(exc, "message", None) or str(exc)
