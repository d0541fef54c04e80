"""
Utilities package.
"""
from .exceptions import (
    FacemarkException,
    InvalidParameterError,
    InvalidImageError,
    ModelLoadError,
    NullPointerError,
    ConfigurationError,
)
from .logging_config import get_logger, setup_logging

__all__ = [
    'FacemarkException', 'InvalidParameterError', 'InvalidImageError',
    'ModelLoadError', 'NullPointerError', 'ConfigurationError',
    'get_logger', 'setup_logging',
]
