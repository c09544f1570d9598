"""Utilities for clean energy readiness scoring."""

from .logging_config import setup_logging
from .validator import DataValidator, ValidationResult

__all__ = ["setup_logging", "DataValidator", "ValidationResult"]
