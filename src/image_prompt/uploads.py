"""
Image intake payloads and data-URL encoding.
"""
import asyncio
import base64
import mimetypes
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Tuple


class IntakeSource(Enum):
    """Where an upload came from; selects the error wording."""
    FILE_PICKER = auto()
    DROP = auto()
    PASTE = auto()


def _guess_mime_type(filename: str) -> str:
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or "application/octet-stream"


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    mime_type: str
    data: bytes
    source: IntakeSource = IntakeSource.FILE_PICKER

    @classmethod
    def from_path(cls, path, source: IntakeSource = IntakeSource.FILE_PICKER) -> "ImageUpload":
        path = Path(path)
        return cls(
            filename=path.name,
            mime_type=_guess_mime_type(path.name),
            data=path.read_bytes(),
            source=source,
        )

    def is_image_type(self) -> bool:
        return (self.mime_type or "").lower().startswith("image/")


def encode_data_url(upload: ImageUpload) -> str:
    encoded = base64.b64encode(upload.data).decode("utf-8")
    return f"data:{upload.mime_type};base64,{encoded}"


def decode_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URL into (mime_type, bytes).

    :raises ValueError: If the string is not a base64 data URL
    """
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL")
    header, payload = data_url[5:].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("Data URL is not base64-encoded")
    mime_type = header[: -len(";base64")] or "application/octet-stream"
    return mime_type, base64.b64decode(payload, validate=True)


async def read_data_url(upload: ImageUpload) -> str:
    """Encode an upload off the event loop."""
    return await asyncio.to_thread(encode_data_url, upload)
