"""Core: config, exception handlers, lifespan, rate limiter."""

from cardfile.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
