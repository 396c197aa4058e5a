"""Configuration management for the autocomplete matcher."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
