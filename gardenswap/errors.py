"""
Error taxonomy for the signup and onboarding flow.
"""
from typing import Optional


class OnboardingError(Exception):
    """Base class. `message` is what the user gets to see."""

    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SignupValidationError(OnboardingError):
    default_message = "Please fill all required fields."


class IdentityCreationError(OnboardingError):
    default_message = "User not created."


class GatewayError(OnboardingError):
    default_message = "Failed to onboard user"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProcedureError(OnboardingError):
    """The remote transactional procedure reported a failure."""

    default_message = "Onboarding procedure failed"
