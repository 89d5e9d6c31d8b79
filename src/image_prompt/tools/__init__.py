from .caption_source import CaptionSource
from .http_caption_source import HttpCaptionSource
from .blip_caption_source import BLIPCaptionSource

__all__ = [
    "CaptionSource",
    "HttpCaptionSource",
    "BLIPCaptionSource",
]
