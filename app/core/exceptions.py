# app/core/exceptions.py
"""
Domain errors raised below the service layer.

Services catch these and map them to HTTPException, so repositories and
pure helpers stay free of FastAPI.
"""


class WaitlistError(Exception):
    """Base class for waitlist domain errors."""


class SignupValidationError(WaitlistError):
    """One or more draft fields failed validation. The store was not touched."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(f"Invalid fields: {', '.join(sorted(errors))}")


class PersistenceError(WaitlistError):
    """The store was unreachable or rejected the operation."""


class AuthorizationDenied(WaitlistError):
    """Candidate email does not match the configured admin email."""
