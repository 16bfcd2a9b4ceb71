"""Core app configuration and database."""

from memosync.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
