import asyncio
import logging
import random
from pathlib import Path
from typing import List, Optional, Union

from .config import ImagePromptConfig
from .context.session_state import SessionState
from .export import (
    COPY_SUCCESS_MESSAGE,
    EXPORT_SUCCESS_MESSAGE,
    build_export,
    clipboard_text,
    write_export,
)
from .models import Category, Mode, OutputFormat, PromptLength, PromptStats
from .orchestration.effects import Effect, EffectRecorder, Renderer, ShowError, ShowSuccess
from .orchestration.events import (
    CategoryToggled,
    ClearRequested,
    Event,
    FormatChanged,
    LengthChanged,
    ModeChanged,
    NegativePromptToggled,
)
from .orchestration.reducer import reduce
from .orchestration.sequencer import IntakeSequencer, IntakeStatus
from .schemas import PromptExport
from .security.file_validator import INVALID_IMAGE_MESSAGES, FileValidator
from .security.exceptions import FileValidationError
from .synthesis.synthesizer import PromptSynthesizer
from .tools.caption_source import CaptionSource
from .uploads import ImageUpload, IntakeSource

logger = logging.getLogger(__name__)


def initial_state(config: ImagePromptConfig) -> SessionState:
    """Build the startup SessionState from configured defaults."""
    return SessionState(
        mode=Mode.from_label(config.default_mode),
        length=PromptLength.from_label(config.default_length),
        output_format=OutputFormat.from_label(config.default_format),
        generate_negative_prompt=config.generate_negative_prompt,
    )


class PromptStudioService:
    """
    Facade over the prompt synthesis subsystem.
    The ONLY entry point for the UI layers.

    Owns the single SessionState. Option changes go through the reducer and
    re-synthesize immediately; image intake goes through the sequencer.
    Every effect is forwarded to the renderer.
    """

    def __init__(
        self,
        config: ImagePromptConfig,
        caption_source: Optional[CaptionSource] = None,
        renderer: Optional[Renderer] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Composition root.

        :param config: ImagePromptConfig instance
        :param caption_source: Caption source for uploads (can be injected later)
        :param renderer: Display adapter; defaults to an EffectRecorder
        :param rng: Random source for the progress animation
        """
        self.config = config
        self.state = initial_state(config)
        self.renderer = renderer or EffectRecorder()
        self._synthesizer = PromptSynthesizer()
        self._sequencer = IntakeSequencer(
            state=self.state,
            synthesizer=self._synthesizer,
            caption_source=caption_source,
            emit=self.renderer.render,
            config=config,
            rng=rng,
        )

    # ----------------------------
    # Dependency injection setters
    # ----------------------------
    def set_caption_source(self, caption_source: CaptionSource) -> None:
        """Inject a caption source."""
        self._sequencer.caption_source = caption_source

    @property
    def status(self) -> IntakeStatus:
        return self._sequencer.status

    # ----------------------------
    # Option events
    # ----------------------------
    def dispatch(self, event: Event) -> List[Effect]:
        """Apply an option event, render and return its effects."""
        effects = reduce(self.state, event, self._synthesizer)
        for effect in effects:
            self.renderer.render(effect)
        return effects

    def toggle_category(self, category: Union[Category, str], enabled: bool) -> List[Effect]:
        if isinstance(category, str):
            category = Category.from_label(category)
        return self.dispatch(CategoryToggled(category, enabled))

    def set_mode(self, mode: Union[Mode, str]) -> List[Effect]:
        if isinstance(mode, str):
            mode = Mode.from_label(mode)
        return self.dispatch(ModeChanged(mode))

    def set_length(self, length: Union[PromptLength, str]) -> List[Effect]:
        if isinstance(length, str):
            length = PromptLength.from_label(length)
        return self.dispatch(LengthChanged(length))

    def set_format(self, output_format: Union[OutputFormat, str]) -> List[Effect]:
        if isinstance(output_format, str):
            output_format = OutputFormat.from_label(output_format)
        return self.dispatch(FormatChanged(output_format))

    def set_negative_prompt(self, enabled: bool) -> List[Effect]:
        return self.dispatch(NegativePromptToggled(enabled))

    def clear(self) -> List[Effect]:
        """Supersede any pending intake and reset to the empty image state."""
        self._sequencer.supersede()
        return self.dispatch(ClearRequested())

    # ----------------------------
    # Image intake
    # ----------------------------
    async def load_upload(self, upload: ImageUpload) -> bool:
        return await self._sequencer.load_upload(upload)

    async def load_image_file(
        self,
        file_path: str,
        source: IntakeSource = IntakeSource.FILE_PICKER,
    ) -> bool:
        """
        Validate an image on disk and run it through the upload path.

        :return: True if a prompt was produced
        """
        try:
            resolved = FileValidator.validate_file_path(file_path)
        except FileValidationError as e:
            return self._reject_file(file_path, str(e), source)

        is_valid, error = FileValidator.validate_image_file(resolved, max_size=self.config.max_upload_bytes)
        if not is_valid:
            return self._reject_file(file_path, error, source)

        upload = await asyncio.to_thread(ImageUpload.from_path, resolved, source)
        return await self.load_upload(upload)

    async def load_sample(self, sample_type: str) -> bool:
        return await self._sequencer.load_sample(sample_type)

    def _reject_file(self, file_path: str, error: str, source: IntakeSource) -> bool:
        logger.warning(f"Rejected image file '{file_path}': {error}")
        message = INVALID_IMAGE_MESSAGES.get(source)
        if message:
            self.renderer.render(ShowError(message))
        return False

    # ----------------------------
    # Output
    # ----------------------------
    def prompt_stats(self) -> PromptStats:
        return self.state.prompt_stats()

    def copy_prompt(self) -> str:
        """Return clipboard text for the current prompt."""
        text = clipboard_text(self.state)
        self.renderer.render(ShowSuccess(COPY_SUCCESS_MESSAGE))
        return text

    def export_prompt(self, directory: Optional[Union[str, Path]] = None) -> PromptExport:
        """
        Build an export snapshot, writing it to directory when given.
        """
        export = build_export(self.state)
        if directory is not None:
            write_export(export, directory)
        self.renderer.render(ShowSuccess(EXPORT_SUCCESS_MESSAGE))
        return export
