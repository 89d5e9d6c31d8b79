"""
Public application facade for Image Prompt Service.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from typing import List, Optional

from .caption_factory import create_caption_source
from .config import ImagePromptConfig
from .orchestration.effects import Effect, Renderer
from .schemas import PromptExport
from .service import PromptStudioService
from .tools.caption_source import CaptionSource
from .uploads import ImageUpload, IntakeSource

logger = logging.getLogger(__name__)


class ImagePromptApp:
    """
    Public application facade for Image Prompt Service.

    Usage:
        config = load_config_from_env()
        app = ImagePromptApp(config)
        app.initialize()
        await app.load_sample("portrait")
        app.set_format("Midjourney")
        print(app.prompt)
    """

    def __init__(
        self,
        config: ImagePromptConfig,
        renderer: Optional[Renderer] = None,
        caption_source: Optional[CaptionSource] = None,
    ):
        """
        :param config: ImagePromptConfig instance
        :param renderer: Optional display adapter
        :param caption_source: Optional caption source overriding the configured provider
        """
        self._config = config
        self._renderer = renderer
        self._caption_source = caption_source
        self._service: Optional[PromptStudioService] = None

    def initialize(self) -> None:
        """
        Create the caption source and wire the service.

        Call this once before anything else.
        """
        if self._service:
            return

        caption_source = self._caption_source or create_caption_source(self._config)
        self._service = PromptStudioService(self._config, renderer=self._renderer)
        self._service.set_caption_source(caption_source)
        logger.info(f"Image prompt app initialized (caption provider: {self._config.caption_provider})")

    @property
    def service(self) -> PromptStudioService:
        if not self._service:
            raise RuntimeError("App not initialized. Call initialize() first.")
        return self._service

    @property
    def prompt(self) -> str:
        return self.service.state.current_prompt

    @property
    def negative_prompt(self) -> str:
        return self.service.state.current_negative_prompt

    async def load_image_file(self, file_path: str, source: IntakeSource = IntakeSource.FILE_PICKER) -> bool:
        return await self.service.load_image_file(file_path, source=source)

    async def load_upload(self, upload: ImageUpload) -> bool:
        return await self.service.load_upload(upload)

    async def load_sample(self, sample_type: str) -> bool:
        return await self.service.load_sample(sample_type)

    def toggle_category(self, category, enabled: bool) -> List[Effect]:
        return self.service.toggle_category(category, enabled)

    def set_mode(self, mode) -> List[Effect]:
        return self.service.set_mode(mode)

    def set_length(self, length) -> List[Effect]:
        return self.service.set_length(length)

    def set_format(self, output_format) -> List[Effect]:
        return self.service.set_format(output_format)

    def set_negative_prompt(self, enabled: bool) -> List[Effect]:
        return self.service.set_negative_prompt(enabled)

    def clear(self) -> List[Effect]:
        return self.service.clear()

    def copy_prompt(self) -> str:
        return self.service.copy_prompt()

    def export_prompt(self, directory=None) -> PromptExport:
        return self.service.export_prompt(directory)
