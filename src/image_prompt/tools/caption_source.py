from typing import Protocol


class CaptionSource(Protocol):
    """Protocol for a captioning backend used by the intake sequencer."""
    async def caption(self, image_data: str) -> str:
        """
        Caption an image.

        :param image_data: Image encoded as a base64 data URL
        :return: Non-empty caption
        :raises CaptionBackendError: On any failure
        """
        ...
