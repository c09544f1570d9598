"""Configuration management for clean energy readiness scoring."""

from .settings import get_default_config, load_config_file

__all__ = ["get_default_config", "load_config_file"]
