"""Configuration package for the planning service."""

from .settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings"]
