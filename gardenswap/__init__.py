"""Garden Swap account signup and onboarding."""

__version__ = "1.0.0"
