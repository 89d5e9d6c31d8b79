"""
Security module for image intake validation.
"""

from .exceptions import SecurityError, FileValidationError, InvalidInputError
from .file_validator import FileValidator

__all__ = [
    "SecurityError",
    "FileValidationError",
    "InvalidInputError",
    "FileValidator",
]
