"""
Configuration package for the PG hostel backend.

Holds environment settings and logging configuration.
"""

from pghostel.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
