"""
Option-change reducer.

reduce() mutates the SessionState for one event and returns the render
instructions that follow from it. Re-synthesis is synchronous.
"""
import logging
from typing import List

from ..context.session_state import SessionState
from ..synthesis.negative import generate_negative_prompt
from ..synthesis.synthesizer import PromptSynthesizer
from .effects import Effect, RenderNegativePrompt, RenderPrompt, ResetView
from .events import (
    CategoryToggled,
    ClearRequested,
    Event,
    FormatChanged,
    LengthChanged,
    ModeChanged,
    NegativePromptToggled,
)

logger = logging.getLogger(__name__)


def resynthesize(state: SessionState, synthesizer: PromptSynthesizer) -> List[Effect]:
    """Re-run synthesis if an image is loaded; no-op otherwise."""
    prompt = synthesizer.synthesize_state(state)
    if prompt is None:
        return []
    return [RenderPrompt.of(prompt)]


def reduce(state: SessionState, event: Event, synthesizer: PromptSynthesizer) -> List[Effect]:
    """
    Apply an option event to state.

    :param state: Session state to mutate
    :param event: Event to apply
    :param synthesizer: Synthesizer used for re-synthesis
    :return: Effects to render, in order
    :raises TypeError: For unknown event types
    """
    if isinstance(event, CategoryToggled):
        state.set_category(event.category, event.enabled)
        return resynthesize(state, synthesizer)

    if isinstance(event, ModeChanged):
        state.mode = event.mode
        return resynthesize(state, synthesizer)

    if isinstance(event, LengthChanged):
        state.length = event.length
        return resynthesize(state, synthesizer)

    if isinstance(event, FormatChanged):
        state.output_format = event.output_format
        return resynthesize(state, synthesizer)

    if isinstance(event, NegativePromptToggled):
        state.generate_negative_prompt = event.enabled
        if event.enabled:
            state.current_negative_prompt = generate_negative_prompt()
            return [RenderNegativePrompt(state.current_negative_prompt)]
        state.current_negative_prompt = ""
        return [RenderNegativePrompt(None)]

    if isinstance(event, ClearRequested):
        state.clear_image()
        logger.info("Session cleared")
        return [ResetView(), RenderNegativePrompt(None)]

    raise TypeError(f"Unsupported event: {type(event).__name__}")
