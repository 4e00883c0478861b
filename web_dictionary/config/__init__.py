"""Configuration management for the web dictionary."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
