# 📄 File: lawmarket/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the kinds of errors the marketplace can report (bad input, not logged in, not allowed,
# missing record, conflicting state) so every failure reaches the caller with a clear meaning.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy carrying HTTP status codes, machine-readable error codes and detail
# payloads; domain-specific errors subclass the abstract kinds and map 1:1 to transport status.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain models and services, command handlers, repository implementations, lawmarket.main handlers

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import status


class LawMarketException(Exception):
    """
    Base exception class for the marketplace backend.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = dict(details or {})
        self.error_code = error_code or self.__class__.__name__.upper()
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# ABSTRACT KINDS
# =============================================================================

class ValidationError(LawMarketException):
    """
    Raised for malformed or out-of-range input, before or during
    aggregate construction.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        invalid_ids: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if invalid_ids:
            details["invalid_ids"] = list(invalid_ids)

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )
        self.field = field
        self.invalid_ids = list(invalid_ids or [])


class UnauthorizedError(LawMarketException):
    """
    Raised when the caller identity is missing or a session
    precondition such as a verified email is not met.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="UNAUTHORIZED"
        )


class ForbiddenError(LawMarketException):
    """Raised when the caller is known but lacks privilege for the target."""

    def __init__(
        self,
        message: str = "Access denied",
        actor_id: Optional[str] = None,
        target_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        if actor_id:
            details["actor_id"] = actor_id
        if target_id:
            details["target_id"] = target_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="FORBIDDEN"
        )


class NotFoundError(LawMarketException):
    """Raised when a referenced aggregate does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(LawMarketException):
    """
    Raised when a uniqueness or state-machine invariant would be
    violated by the requested operation.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        conflicting_field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "CONFLICT"
    ):
        details = dict(details or {})
        if conflicting_field:
            details["conflicting_field"] = conflicting_field

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code=error_code
        )


class DatabaseError(LawMarketException):
    """Raised when the storage layer fails for reasons other than a constraint."""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


# =============================================================================
# ACCOUNT EXCEPTIONS
# =============================================================================

class AccountNotFoundError(NotFoundError):
    def __init__(self, account_id: Optional[str] = None):
        super().__init__(
            message="User not found",
            resource_type="account",
            resource_id=account_id
        )


# =============================================================================
# CLIENT EXCEPTIONS
# =============================================================================

class ClientProfileNotFoundError(NotFoundError):
    def __init__(
        self,
        message: str = "Client profile not found. Complete onboarding first.",
        resource_id: Optional[str] = None
    ):
        super().__init__(
            message=message,
            resource_type="client_profile",
            resource_id=resource_id
        )


class ClientProfileAlreadyExistsError(ConflictError):
    def __init__(self, account_id: Optional[str] = None):
        super().__init__(
            message="Client profile already exists for this user",
            conflicting_field="account_id",
            details={"account_id": account_id} if account_id else None,
            error_code="CLIENT_PROFILE_EXISTS"
        )


# =============================================================================
# LAWYER EXCEPTIONS
# =============================================================================

class LawyerProfileNotFoundError(NotFoundError):
    def __init__(
        self,
        message: str = "Lawyer profile not found. Start onboarding first.",
        resource_id: Optional[str] = None
    ):
        super().__init__(
            message=message,
            resource_type="lawyer_profile",
            resource_id=resource_id
        )


class LawyerProfileAlreadyExistsError(ConflictError):
    def __init__(self, account_id: Optional[str] = None):
        super().__init__(
            message="Lawyer profile already exists for this user",
            conflicting_field="account_id",
            details={"account_id": account_id} if account_id else None,
            error_code="LAWYER_PROFILE_EXISTS"
        )


class BarNumberAlreadyRegisteredError(ConflictError):
    def __init__(self, bar_number: str):
        super().__init__(
            message="Bar number is already registered",
            conflicting_field="bar_number",
            details={"bar_number": bar_number},
            error_code="BAR_NUMBER_TAKEN"
        )


class InvalidOnboardingStepError(ConflictError):
    """
    Raised when a lawyer onboarding step is attempted out of order.

    The caller should re-read the profile before retrying, since the
    step has usually already moved on.
    """

    def __init__(self, message: str, current_step: Optional[str] = None):
        super().__init__(
            message=message,
            details={"current_step": current_step} if current_step else None,
            error_code="INVALID_ONBOARDING_STEP"
        )
        self.current_step = current_step


class IncompleteOnboardingError(ConflictError):
    def __init__(self, message: str, missing: Optional[str] = None):
        super().__init__(
            message=message,
            details={"missing": missing} if missing else None,
            error_code="INCOMPLETE_ONBOARDING"
        )
