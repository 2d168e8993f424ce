# gardenswap/routers/__init__.py
from . import health, onboard

__all__ = ["health", "onboard"]
