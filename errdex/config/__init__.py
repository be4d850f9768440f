"""Configuration for errdex: constants and environment-backed settings."""

from .settings import Settings, get_env_info, load_env_files, load_settings

__all__ = ["Settings", "get_env_info", "load_env_files", "load_settings"]
