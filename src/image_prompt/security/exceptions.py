"""
Security-related exceptions.

OOP: Single Responsibility - Exception classes are separated by concern.
"""


class SecurityError(Exception):
    """Base exception for security violations."""

    pass


class FileValidationError(SecurityError):
    """Raised when file validation fails."""

    pass


class InvalidInputError(FileValidationError):
    """Raised when a selected, dropped or pasted file is not an image."""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message
