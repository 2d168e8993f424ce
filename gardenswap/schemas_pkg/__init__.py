# gardenswap/schemas_pkg/__init__.py

# Onboarding schemas
from .onboarding import (
    REQUIRED_WIRE_FIELDS,
    OnboardingRequest,
    OnboardingResponse,
    ErrorResponse,
)

__all__ = [
    "REQUIRED_WIRE_FIELDS",
    "OnboardingRequest",
    "OnboardingResponse",
    "ErrorResponse",
]
