import asyncio
import io
import logging
import os
from typing import Any, Optional

from PIL import Image

from ..exceptions import CaptionBackendError
from ..uploads import decode_data_url

logger = logging.getLogger(__name__)


class BLIPCaptionSource:
    """
    CaptionSource implementation using a local BLIP captioning model.

    - Model loading is separate from inference
    - Image decoding is separate from model operations
    - Inference runs in a worker thread so the event loop stays free
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        model_path: Optional[str] = None,
        model: Any = None,
        device: Optional[str] = None,
        max_length: int = 50,
    ):
        """
        Initialize BLIP caption source.

        :param model_name: HuggingFace model name (e.g., "Salesforce/blip-image-captioning-base")
        :param model_path: Optional local path to model files
        :param model: Optional pre-loaded model dict with "processor" and "model" (for testing)
        :param device: Device to run on ("cuda", "cpu", or None/"auto" for auto-detect)
        :param max_length: Maximum caption length in tokens
        """
        self.model_name = model_name or "Salesforce/blip-image-captioning-base"
        self.model_path = model_path
        self.device = device if device not in (None, "auto") else self._detect_device()
        self.max_length = max_length

        # Dependency injection: allow pre-loaded model for testing
        if model is not None:
            self._processor = model.get("processor")
            self._blip_model = model.get("model")
            self._is_loaded = True
        else:
            self._processor = None
            self._blip_model = None
            self._is_loaded = False

    def _detect_device(self) -> str:
        """Detect available device (CUDA or CPU)."""
        try:
            import torch
            return "cuda" if torch.cuda.is_available() else "cpu"
        except ImportError:
            return "cpu"

    def _load_model(self) -> None:
        """
        Load BLIP model and processor.
        Separated from __init__ for lazy loading and better error handling.
        """
        try:
            import torch
            from transformers import BlipForConditionalGeneration, BlipProcessor
        except ImportError as e:
            raise CaptionBackendError(
                "transformers or torch not installed. "
                "Install with: pip install 'image-prompt-service[blip]'"
            ) from e

        try:
            dtype = torch.float16 if self.device == "cuda" else torch.float32
            source = self.model_path if self.model_path and os.path.exists(self.model_path) else self.model_name

            self._processor = BlipProcessor.from_pretrained(source)
            self._blip_model = BlipForConditionalGeneration.from_pretrained(
                source,
                use_safetensors=True,
                dtype=dtype,
                low_cpu_mem_usage=True,
            )
            self._blip_model.to(self.device)
            self._blip_model.eval()
            self._is_loaded = True
            logger.info(f"Loaded BLIP model '{source}' on {self.device}")

        except Exception as e:
            raise CaptionBackendError(
                f"Failed to load BLIP model '{self.model_name}': {str(e)}"
            ) from e

    def _ensure_model_loaded(self) -> None:
        if not self._is_loaded:
            self._load_model()

    def _decode_image(self, image_data: str) -> Image.Image:
        try:
            _, raw = decode_data_url(image_data)
            image = Image.open(io.BytesIO(raw))
            # Convert to RGB if necessary (handles RGBA, P, etc.)
            if image.mode != "RGB":
                image = image.convert("RGB")
            return image
        except Exception as e:
            raise CaptionBackendError(f"Failed to decode image: {str(e)}") from e

    def _generate_caption(self, image: Image.Image) -> str:
        """Core inference, run synchronously."""
        self._ensure_model_loaded()

        try:
            import torch

            inputs = self._processor(images=image, return_tensors="pt")
            inputs = {k: v.to(self.device) for k, v in inputs.items()}

            with torch.no_grad():
                generated_ids = self._blip_model.generate(**inputs, max_length=self.max_length)

            return self._processor.decode(generated_ids[0], skip_special_tokens=True)

        except Exception as e:
            raise CaptionBackendError(f"BLIP inference failed: {str(e)}") from e

    def caption_sync(self, image_data: str) -> str:
        image = self._decode_image(image_data)
        caption = self._generate_caption(image).strip()
        if not caption:
            raise CaptionBackendError("BLIP produced an empty caption")
        return caption

    async def caption(self, image_data: str) -> str:
        return await asyncio.to_thread(self.caption_sync, image_data)
