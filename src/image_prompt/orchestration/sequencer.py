"""
Intake/analysis sequencer.

State machine: IDLE -> LOADING -> (CAPTIONING | SAMPLE_READY) -> READY.
A failed caption attempt returns to IDLE with no image.

Every intake takes a new attempt id. Continuations compare their id with the
current one before touching SessionState, so a superseded attempt (new image
or clear) can finish late without overwriting newer state. The caption source
is never cancelled; its late result is simply ignored.
"""
import asyncio
import logging
import random
from enum import Enum, auto
from typing import Optional

from ..config import ImagePromptConfig
from ..context.session_state import SessionState
from ..exceptions import CaptionBackendError, ServiceNotInitializedError
from ..models import ImageRef
from ..samples import find_sample, sample_image_ref
from ..security.exceptions import InvalidInputError
from ..security.file_validator import FileValidator
from ..synthesis.negative import generate_negative_prompt
from ..synthesis.synthesizer import PromptSynthesizer
from ..tools.caption_source import CaptionSource
from ..uploads import ImageUpload, read_data_url
from .effects import (
    EffectSink,
    HideProgress,
    RenderNegativePrompt,
    RenderPrompt,
    ResetView,
    ShowAnalysisComplete,
    ShowError,
    ShowImage,
    ShowProgress,
)
from .progress import ProgressAnimation

logger = logging.getLogger(__name__)

CAPTION_FAILED_MESSAGE = "AI prompt extraction failed."


class IntakeStatus(Enum):
    IDLE = auto()
    LOADING = auto()
    CAPTIONING = auto()
    SAMPLE_READY = auto()
    READY = auto()


class IntakeSequencer:
    """
    Sequences image intake, captioning and synthesis.

    Single logical thread: all methods run on one event loop. Only the
    continuation of the current attempt may mutate state.
    """

    def __init__(
        self,
        state: SessionState,
        synthesizer: PromptSynthesizer,
        caption_source: Optional[CaptionSource],
        emit: EffectSink,
        config: Optional[ImagePromptConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._state = state
        self._synthesizer = synthesizer
        self.caption_source = caption_source
        self._emit = emit
        self._config = config or ImagePromptConfig()
        self._rng = rng or random.Random()
        self._attempt_id = 0
        self._progress: Optional[ProgressAnimation] = None
        self.status = IntakeStatus.IDLE

    @property
    def current_attempt_id(self) -> int:
        return self._attempt_id

    def is_current(self, attempt_id: int) -> bool:
        return attempt_id == self._attempt_id

    def supersede(self) -> int:
        """
        Invalidate any in-flight attempt and stop its progress animation.

        :return: The new current attempt id
        """
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
        self._attempt_id += 1
        self.status = IntakeStatus.IDLE
        return self._attempt_id

    # ----------------------------
    # Upload path
    # ----------------------------
    async def load_upload(self, upload: ImageUpload) -> bool:
        """
        Validate, read and caption an uploaded image, then synthesize.

        :param upload: Uploaded image payload
        :return: True if this attempt produced a prompt
        :raises ServiceNotInitializedError: If no caption source is configured
        """
        if self.caption_source is None:
            raise ServiceNotInitializedError("Caption source is not initialized.")

        try:
            FileValidator.validate_upload(upload, max_size=self._config.max_upload_bytes)
        except InvalidInputError as e:
            logger.warning(f"Rejected upload: {e}")
            if e.user_message:
                self._emit(ShowError(e.user_message))
            return False

        attempt_id = self._begin_attempt()
        self.status = IntakeStatus.LOADING
        logger.info(f"Intake #{attempt_id}: reading '{upload.filename}' ({len(upload.data)} bytes)")

        image_data = await read_data_url(upload)
        if not self.is_current(attempt_id):
            logger.debug(f"Intake #{attempt_id}: superseded during read")
            return False

        image = ImageRef(handle=image_data)
        self._emit(ShowImage(image))
        self.status = IntakeStatus.CAPTIONING
        progress = self._start_progress(attempt_id, ceiling=self._config.progress_ceiling)

        try:
            caption = await self.caption_source.caption(image_data)
        except asyncio.CancelledError:
            if self.is_current(attempt_id):
                self.status = IntakeStatus.IDLE
            raise
        except Exception as e:
            return self._fail_caption(attempt_id, e)
        finally:
            self._stop_progress(progress)

        if not self.is_current(attempt_id):
            logger.debug(f"Intake #{attempt_id}: ignoring caption of superseded attempt")
            return False

        self._emit(ShowProgress(100.0))
        await asyncio.sleep(self._config.upload_hold_seconds)
        if not self.is_current(attempt_id):
            return False

        return self._complete(attempt_id, image, caption)

    # ----------------------------
    # Sample path
    # ----------------------------
    async def load_sample(self, sample_type: str) -> bool:
        """
        Load a built-in sample: local progress animation, no caption source call.

        :param sample_type: "portrait", "product" or "landscape"
        :return: True if this attempt produced a prompt
        """
        sample = find_sample(sample_type)
        if sample is None:
            logger.warning(f"Unknown sample type: {sample_type}")
            self._emit(ShowError(f"Unknown sample image: {sample_type}"))
            return False

        attempt_id = self._begin_attempt()
        image = sample_image_ref(sample_type)
        self._emit(ShowImage(image))
        self.status = IntakeStatus.SAMPLE_READY
        logger.info(f"Intake #{attempt_id}: loading sample '{sample.title}'")

        progress = self._start_progress(attempt_id, ceiling=100.0)
        try:
            await progress.wait()
        except asyncio.CancelledError:
            if self.is_current(attempt_id):
                self.status = IntakeStatus.IDLE
            raise
        finally:
            self._stop_progress(progress)
        if not self.is_current(attempt_id):
            logger.debug(f"Intake #{attempt_id}: sample superseded")
            return False

        await asyncio.sleep(self._config.sample_hold_seconds)
        if not self.is_current(attempt_id):
            return False

        return self._complete(attempt_id, image, sample.prompt)

    # ----------------------------
    # Internals
    # ----------------------------
    def _begin_attempt(self) -> int:
        attempt_id = self.supersede()
        self._state.clear_image()
        self._emit(ResetView())
        self._emit(RenderNegativePrompt(None))
        return attempt_id

    def _start_progress(self, attempt_id: int, ceiling: float) -> ProgressAnimation:
        def on_tick(value: float) -> None:
            if self.is_current(attempt_id):
                self._emit(ShowProgress(value))

        self._emit(ShowProgress(0.0))
        progress = ProgressAnimation(
            on_tick,
            interval=self._config.progress_interval_seconds,
            ceiling=ceiling,
            rng=self._rng,
        )
        progress.start()
        self._progress = progress
        return progress

    def _stop_progress(self, progress: ProgressAnimation) -> None:
        progress.stop()
        if self._progress is progress:
            self._progress = None

    def _fail_caption(self, attempt_id: int, error: Exception) -> bool:
        """Return a failed caption attempt to the empty image state."""
        if not self.is_current(attempt_id):
            logger.debug(f"Intake #{attempt_id}: ignoring failure of superseded attempt: {error}")
            return False

        if isinstance(error, CaptionBackendError):
            logger.warning(f"Intake #{attempt_id}: caption backend failed: {error}")
        else:
            logger.error(f"Intake #{attempt_id}: unexpected caption failure: {error}", exc_info=True)

        self._state.clear_image()
        self.status = IntakeStatus.IDLE
        self._emit(HideProgress())
        self._emit(ShowError(CAPTION_FAILED_MESSAGE))
        return False

    def _complete(self, attempt_id: int, image: ImageRef, caption: str) -> bool:
        self._emit(HideProgress())
        self._emit(ShowAnalysisComplete())

        self._state.install_image(image, caption)
        if self._state.generate_negative_prompt:
            self._state.current_negative_prompt = generate_negative_prompt()
            self._emit(RenderNegativePrompt(self._state.current_negative_prompt))

        prompt = self._synthesizer.synthesize_state(self._state)
        self._emit(RenderPrompt.of(prompt))
        self.status = IntakeStatus.READY
        logger.info(f"Intake #{attempt_id}: ready ({len(prompt)} characters)")
        return True
