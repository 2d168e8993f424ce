# Configuration package
"""
Configuration package for Garden Swap onboarding
Exports settings loaders from settings.py for easy import
"""
from .settings import (
    PublicSettings,
    Settings,
    get_public_settings,
    get_settings,
    validate_settings,
)

__all__ = [
    "PublicSettings",
    "Settings",
    "get_public_settings",
    "get_settings",
    "validate_settings",
]
