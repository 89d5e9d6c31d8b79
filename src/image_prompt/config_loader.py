"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import DEFAULT_CAPTION_API_URL, ImagePromptConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
    validate_choice,
    validate_path,
    validate_positive,
    validate_url,
)
from .models import Mode, OutputFormat, PromptLength

CAPTION_PROVIDERS = ("http", "blip")
DEVICES = ("auto", "cpu", "cuda")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config_from_env() -> ImagePromptConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = ImagePromptApp(config)
        app.initialize()

    :return: Validated ImagePromptConfig instance
    :raises: ConfigurationError if values are invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    config = ImagePromptConfig(
        caption_provider=get_optional_env("CAPTION_PROVIDER", default="http"),
        caption_api_url=get_optional_env("CAPTION_API_URL", default=DEFAULT_CAPTION_API_URL),
        caption_timeout_seconds=get_float_env("CAPTION_TIMEOUT_SECONDS", 60.0),
        vision_model_name=get_optional_env(
            "VISION_MODEL_NAME",
            default="Salesforce/blip-image-captioning-base"
        ),
        vision_model_path=get_optional_env("VISION_MODEL_PATH"),
        device=get_optional_env("DEVICE", default="auto"),
        progress_interval_seconds=get_float_env("PROGRESS_INTERVAL_SECONDS", 0.15),
        upload_hold_seconds=get_float_env("UPLOAD_HOLD_SECONDS", 0.6),
        sample_hold_seconds=get_float_env("SAMPLE_HOLD_SECONDS", 0.5),
        max_upload_bytes=get_int_env("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        default_mode=get_optional_env("DEFAULT_MODE", default="Basic"),
        default_length=get_optional_env("DEFAULT_LENGTH", default="Medium"),
        default_format=get_optional_env("DEFAULT_FORMAT", default="Generic"),
        generate_negative_prompt=get_bool_env("GENERATE_NEGATIVE_PROMPT", False),
        log_level=get_optional_env("LOG_LEVEL", default="INFO"),
    )

    return validate_config(config)


def validate_config(config: ImagePromptConfig) -> ImagePromptConfig:
    """
    Validate and normalise a config in place.

    :return: The same config instance
    :raises: ConfigurationError on the first invalid value
    """
    config.caption_provider = validate_choice(
        config.caption_provider, "CAPTION_PROVIDER", CAPTION_PROVIDERS
    )
    if config.caption_provider == "http":
        validate_url(config.caption_api_url, "CAPTION_API_URL")
    if config.vision_model_path:
        validate_path(config.vision_model_path, "VISION_MODEL_PATH", must_exist=True)

    config.device = validate_choice(config.device, "DEVICE", DEVICES)
    config.log_level = validate_choice(config.log_level, "LOG_LEVEL", LOG_LEVELS)

    validate_positive(config.caption_timeout_seconds, "CAPTION_TIMEOUT_SECONDS")
    validate_positive(config.progress_interval_seconds, "PROGRESS_INTERVAL_SECONDS", allow_zero=True)
    validate_positive(config.upload_hold_seconds, "UPLOAD_HOLD_SECONDS", allow_zero=True)
    validate_positive(config.sample_hold_seconds, "SAMPLE_HOLD_SECONDS", allow_zero=True)
    validate_positive(config.max_upload_bytes, "MAX_UPLOAD_BYTES")

    config.default_mode = validate_choice(
        config.default_mode, "DEFAULT_MODE", [m.label for m in Mode]
    )
    config.default_length = validate_choice(
        config.default_length, "DEFAULT_LENGTH", [length.label for length in PromptLength]
    )
    config.default_format = validate_choice(
        config.default_format, "DEFAULT_FORMAT", [f.label for f in OutputFormat]
    )

    return config
