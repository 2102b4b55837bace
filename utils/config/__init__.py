"""
Configuration utilities for digestkit.

This package provides configuration normalization and validation for the
[digest] settings used by hosts.
"""

from .config_normalizer import ConfigNormalizer
from .config_validator import ConfigValidator
from .validation_models import ValidationResult, ValidationError, ErrorCode

__all__ = [
    'ConfigNormalizer',
    'ConfigValidator',
    'ValidationResult',
    'ValidationError',
    'ErrorCode',
]
