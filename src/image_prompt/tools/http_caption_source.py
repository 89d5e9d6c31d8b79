"""
Remote caption source.

POSTs {"image": <data URL>} to a captioning proxy and reads {"caption": ...}.
"""
import logging
from typing import Optional

import httpx

from ..exceptions import CaptionBackendError

logger = logging.getLogger(__name__)


class HttpCaptionSource:
    """CaptionSource backed by an HTTP captioning endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        :param endpoint: Captioning endpoint URL
        :param timeout: Request timeout in seconds
        :param client: Optional pre-built client (for dependency injection/testing)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client

    async def caption(self, image_data: str) -> str:
        try:
            if self._client is not None:
                response = await self._post(self._client, image_data)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, image_data)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise CaptionBackendError(
                f"Caption backend returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise CaptionBackendError(f"Caption backend error: {e}") from e
        except ValueError as e:
            raise CaptionBackendError("Caption backend returned invalid JSON") from e

        caption = data.get("caption") if isinstance(data, dict) else None
        if not isinstance(caption, str) or not caption.strip():
            raise CaptionBackendError("Caption backend response had no caption")

        logger.info(f"Caption received from {self.endpoint}: {caption.strip()}")
        return caption.strip()

    async def _post(self, client: httpx.AsyncClient, image_data: str) -> httpx.Response:
        return await client.post(
            self.endpoint,
            json={"image": image_data},
            headers={"Content-Type": "application/json"},
        )
