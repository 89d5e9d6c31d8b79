"""
Image Prompt Service: turn an image into a styled text-to-image prompt.
"""
from .app import ImagePromptApp
from .config import ImagePromptConfig
from .config_loader import load_config_from_env
from .models import Category, ImageClassification, Mode, OutputFormat, PromptLength
from .service import PromptStudioService

__all__ = [
    "ImagePromptApp",
    "ImagePromptConfig",
    "load_config_from_env",
    "Category",
    "ImageClassification",
    "Mode",
    "OutputFormat",
    "PromptLength",
    "PromptStudioService",
]
