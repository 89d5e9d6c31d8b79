class ImagePromptError(Exception):
    """Base exception for image prompt service."""


class ConfigurationError(ImagePromptError):
    """Raised when configuration values are missing or invalid."""


class CaptionBackendError(ImagePromptError):
    """Raised when a caption source fails to produce a caption."""


class ServiceNotInitializedError(ImagePromptError):
    """Raised when the service is used before initialization."""
