"""Configuration module for tidalhifi."""

from .settings import TidalSettings, get_settings

__all__ = ["TidalSettings", "get_settings"]
