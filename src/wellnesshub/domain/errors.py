"""
Domain-specific error types for business rule violations.

Each error carries the HTTP status the API layer answers with: 400 for
rule violations, 404 for missing records.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DomainNotFoundError(DomainError):
    """Base for missing records."""

    status_code = 404


class AccountNotFoundError(DomainNotFoundError):
    """Account not found (or not of the expected role)."""

    def __init__(self, account_id: str, role: Optional[str] = None) -> None:
        label = "Practitioner" if role == "practitioner" else "User"
        message = f"{label} not found"
        super().__init__(message, "ACCOUNT_NOT_FOUND", {"account_id": account_id})


class AppointmentNotFoundError(DomainNotFoundError):
    """Appointment not found for the calling practitioner."""

    def __init__(self, appointment_id: str) -> None:
        super().__init__(
            "Appointment not found", "APPOINTMENT_NOT_FOUND", {"appointment_id": appointment_id}
        )


class DayNotEnabledError(DomainNotFoundError):
    """Weekday entry missing from the availability template."""

    def __init__(self, day: str) -> None:
        super().__init__(
            f"Day '{day}' is not enabled in the availability template",
            "DAY_NOT_ENABLED",
            {"day": day},
        )


class PostNotFoundError(DomainNotFoundError):
    """Blog post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__("Post not found", "POST_NOT_FOUND", {"post_id": post_id})


class InvalidProfileDataError(DomainError):
    """Profile or template field failed validation."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(message, "INVALID_PROFILE_DATA", {"field": field, "value": value})


class DayNotAvailableError(DomainError):
    """Requested date falls on a weekday the practitioner does not offer."""

    def __init__(self, day: str) -> None:
        super().__init__(
            "Practitioner not available on selected day", "DAY_NOT_AVAILABLE", {"day": day}
        )


class SlotNotAvailableError(DomainError):
    """Requested slot does not exist for that weekday or is already booked."""

    def __init__(self, day: str, start: str, end: str) -> None:
        super().__init__(
            "Time slot not available",
            "SLOT_NOT_AVAILABLE",
            {"day": day, "start": start, "end": end},
        )


class InvalidStatusTransitionError(DomainError):
    """Appointment status change not permitted from the current status."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change appointment status from '{current}' to '{requested}'",
            "INVALID_STATUS_TRANSITION",
            {"current": current, "requested": requested},
        )


class DuplicateAccountError(DomainError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already registered", "DUPLICATE_ACCOUNT", {"email": email})


class AuthorNotPractitionerError(DomainError):
    """Blog posts may only be authored by practitioner accounts."""

    def __init__(self, author_id: str) -> None:
        super().__init__(
            "Author must be a registered practitioner",
            "AUTHOR_NOT_PRACTITIONER",
            {"author_id": author_id},
        )
