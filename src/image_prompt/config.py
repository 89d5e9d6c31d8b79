from dataclasses import dataclass
from typing import Optional


DEFAULT_CAPTION_API_URL = "https://replicate-proxy-l522.vercel.app/api/blip-caption"


@dataclass
class ImagePromptConfig:
    # Caption source
    caption_provider: str = "http"  # http | blip
    caption_api_url: str = DEFAULT_CAPTION_API_URL
    caption_timeout_seconds: float = 60.0

    # Vision (local BLIP)
    vision_model_name: str = "Salesforce/blip-image-captioning-base"
    vision_model_path: Optional[str] = None
    device: str = "auto"  # auto | cpu | cuda

    # Progress animation (cosmetic only)
    progress_interval_seconds: float = 0.15
    progress_ceiling: float = 95.0
    upload_hold_seconds: float = 0.6
    sample_hold_seconds: float = 0.5

    # Intake
    max_upload_bytes: int = 10 * 1024 * 1024

    # Initial options
    default_mode: str = "Basic"
    default_length: str = "Medium"
    default_format: str = "Generic"
    generate_negative_prompt: bool = False

    log_level: str = "INFO"
