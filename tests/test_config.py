"""
Tests for configuration loading and validation.
"""
import pytest

from image_prompt.config import DEFAULT_CAPTION_API_URL, ImagePromptConfig
from image_prompt.config_loader import load_config_from_env, validate_config
from image_prompt.config_validator import (
    get_bool_env,
    get_float_env,
    get_optional_env,
    validate_choice,
    validate_url,
)
from image_prompt.exceptions import ConfigurationError
from image_prompt.models import (
    CATEGORY_ASPECTS,
    MODE_DESCRIPTIONS,
    Category,
    Mode,
    OutputFormat,
    PromptLength,
)

ENV_KEYS = [
    "CAPTION_PROVIDER", "CAPTION_API_URL", "CAPTION_TIMEOUT_SECONDS", "VISION_MODEL_NAME",
    "VISION_MODEL_PATH", "DEVICE", "PROGRESS_INTERVAL_SECONDS", "UPLOAD_HOLD_SECONDS",
    "SAMPLE_HOLD_SECONDS", "MAX_UPLOAD_BYTES", "DEFAULT_MODE", "DEFAULT_LENGTH",
    "DEFAULT_FORMAT", "GENERATE_NEGATIVE_PROMPT", "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep load_dotenv() away from any developer .env
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestLoadConfig:

    def test_defaults(self, clean_env):
        config = load_config_from_env()

        assert config.caption_provider == "http"
        assert config.caption_api_url == DEFAULT_CAPTION_API_URL
        assert config.default_mode == "Basic"
        assert config.default_length == "Medium"
        assert config.default_format == "Generic"
        assert config.generate_negative_prompt is False
        assert config.progress_interval_seconds == 0.15

    def test_overrides_are_normalised(self, clean_env):
        clean_env.setenv("CAPTION_PROVIDER", "BLIP")
        clean_env.setenv("DEFAULT_FORMAT", "stable diffusion")
        clean_env.setenv("DEFAULT_LENGTH", "ultra-detailed")
        clean_env.setenv("GENERATE_NEGATIVE_PROMPT", "true")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = load_config_from_env()

        assert config.caption_provider == "blip"
        assert config.default_format == "Stable Diffusion"
        assert config.default_length == "Ultra-detailed"
        assert config.generate_negative_prompt is True
        assert config.log_level == "DEBUG"

    def test_invalid_mode(self, clean_env):
        clean_env.setenv("DEFAULT_MODE", "Verbose")
        with pytest.raises(ConfigurationError, match="DEFAULT_MODE"):
            load_config_from_env()

    def test_invalid_number(self, clean_env):
        clean_env.setenv("CAPTION_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigurationError, match="CAPTION_TIMEOUT_SECONDS"):
            load_config_from_env()

    def test_missing_model_path(self, clean_env, tmp_path):
        clean_env.setenv("VISION_MODEL_PATH", str(tmp_path / "nope"))
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_from_env()

    def test_placeholder_url_falls_back(self, clean_env):
        clean_env.setenv("CAPTION_API_URL", "your_caption_url")
        with pytest.warns(UserWarning, match="placeholder"):
            config = load_config_from_env()
        assert config.caption_api_url == DEFAULT_CAPTION_API_URL


class TestValidateConfig:

    def test_zero_intervals_allowed(self):
        config = validate_config(ImagePromptConfig(progress_interval_seconds=0, upload_hold_seconds=0))
        assert config.progress_interval_seconds == 0

    def test_zero_timeout_rejected(self):
        with pytest.raises(ConfigurationError, match="positive"):
            validate_config(ImagePromptConfig(caption_timeout_seconds=0))

    def test_bad_url_only_checked_for_http(self):
        validate_config(ImagePromptConfig(caption_provider="blip", caption_api_url="nope"))
        with pytest.raises(ConfigurationError, match="CAPTION_API_URL"):
            validate_config(ImagePromptConfig(caption_provider="http", caption_api_url="nope"))


class TestValidators:

    def test_validate_url(self):
        assert validate_url("http://localhost:8000/caption", "URL") == "http://localhost:8000/caption"
        with pytest.raises(ConfigurationError):
            validate_url("ftp://host/file", "URL")
        with pytest.raises(ConfigurationError):
            validate_url("", "URL")

    def test_validate_choice(self):
        assert validate_choice("dall-e", "FORMAT", ["Generic", "DALL-E"]) == "DALL-E"
        with pytest.raises(ConfigurationError, match="Allowed: Generic, DALL-E"):
            validate_choice("Imagen", "FORMAT", ["Generic", "DALL-E"])

    def test_env_helpers(self, monkeypatch):
        monkeypatch.setenv("FLAG_ON", "Yes")
        monkeypatch.setenv("RATIO", "0.5")
        monkeypatch.delenv("NOT_SET", raising=False)

        assert get_bool_env("FLAG_ON") is True
        assert get_bool_env("NOT_SET", default=True) is True
        assert get_float_env("RATIO", 1.0) == 0.5
        assert get_optional_env("NOT_SET", "fallback") == "fallback"


class TestLabels:
    """Enum labels are what config and exports use."""

    def test_from_label_accepts_labels_and_names(self):
        assert OutputFormat.from_label("DALL-E") is OutputFormat.DALLE
        assert OutputFormat.from_label("dalle") is OutputFormat.DALLE
        assert PromptLength.from_label("Ultra-detailed") is PromptLength.ULTRA_DETAILED
        assert PromptLength.from_label("ultra_detailed") is PromptLength.ULTRA_DETAILED
        assert Category.from_label("color & materials") is Category.COLOR_MATERIALS

    def test_catalog_covers_every_option(self):
        assert set(CATEGORY_ASPECTS) == set(Category)
        assert set(MODE_DESCRIPTIONS) == set(Mode)
        assert all(len(aspects) == 5 for aspects in CATEGORY_ASPECTS.values())

    def test_from_label_rejects_unknown(self):
        with pytest.raises(ValueError, match="Allowed: Basic, Detailed, Technical, Creative"):
            Mode.from_label("Verbose")
