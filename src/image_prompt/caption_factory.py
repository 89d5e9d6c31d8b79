from typing import Optional

from .config import ImagePromptConfig
from .exceptions import ConfigurationError
from .tools.blip_caption_source import BLIPCaptionSource
from .tools.caption_source import CaptionSource
from .tools.http_caption_source import HttpCaptionSource


def create_caption_source(config: Optional[ImagePromptConfig] = None) -> CaptionSource:
    """
    Factory function to create the configured caption source.

    :param config: ImagePromptConfig instance (optional, uses defaults if not provided)
    :return: CaptionSource for the configured provider
    :raises ConfigurationError: For unknown providers
    """
    config = config or ImagePromptConfig()
    provider = config.caption_provider.lower()

    if provider == "http":
        return HttpCaptionSource(
            endpoint=config.caption_api_url,
            timeout=config.caption_timeout_seconds,
        )

    if provider == "blip":
        return BLIPCaptionSource(
            model_name=config.vision_model_name,
            model_path=config.vision_model_path,
            device=config.device,
        )

    raise ConfigurationError(f"Unknown caption provider: {config.caption_provider}")
