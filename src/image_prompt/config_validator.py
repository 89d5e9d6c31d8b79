"""
Configuration validation utilities.

Every helper raises ConfigurationError with a message naming the offending key.
"""
import os
import warnings
from typing import Iterable, Optional
from urllib.parse import urlparse

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    value = get_optional_env(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_float_env(key: str, default: float) -> float:
    value = get_optional_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number, got '{value}'") from e


def get_int_env(key: str, default: int) -> int:
    value = get_optional_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer, got '{value}'") from e


def validate_choice(value: str, key_name: str, allowed: Iterable[str]) -> str:
    """
    Validate that value is one of the allowed choices (case-insensitive).

    :return: The matching allowed choice
    :raises: ConfigurationError if not allowed
    """
    allowed = list(allowed)
    for choice in allowed:
        if value.strip().lower() == choice.lower():
            return choice
    raise ConfigurationError(
        f"{key_name} has invalid value '{value}'. Allowed: {', '.join(allowed)}"
    )


def validate_positive(value: float, key_name: str, allow_zero: bool = False) -> float:
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ConfigurationError(f"{key_name} must be {bound}, got {value}")
    return value


def validate_url(url: str, url_name: str) -> str:
    """
    Validate an http(s) URL.

    :param url: URL to validate
    :param url_name: Name of the setting (for error messages)
    :return: Validated URL
    :raises: ConfigurationError if invalid
    """
    if not url:
        raise ConfigurationError(f"{url_name} is required.")

    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigurationError(
            f"{url_name} must be an http(s) URL, got '{url}'"
        )

    return url


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file/directory exists."
        )

    return path


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "replace",
        "todo",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
