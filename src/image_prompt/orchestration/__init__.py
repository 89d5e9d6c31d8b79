"""
Orchestration layer: option reducer, intake sequencer, render effects.
"""
from .effects import (
    Effect,
    EffectRecorder,
    HideProgress,
    Renderer,
    RenderNegativePrompt,
    RenderPrompt,
    ResetView,
    ShowAnalysisComplete,
    ShowError,
    ShowImage,
    ShowProgress,
    ShowSuccess,
)
from .events import (
    CategoryToggled,
    ClearRequested,
    Event,
    FormatChanged,
    LengthChanged,
    ModeChanged,
    NegativePromptToggled,
)
from .progress import ProgressAnimation
from .reducer import reduce
from .sequencer import CAPTION_FAILED_MESSAGE, IntakeSequencer, IntakeStatus

__all__ = [
    "Effect",
    "EffectRecorder",
    "HideProgress",
    "Renderer",
    "RenderNegativePrompt",
    "RenderPrompt",
    "ResetView",
    "ShowAnalysisComplete",
    "ShowError",
    "ShowImage",
    "ShowProgress",
    "ShowSuccess",
    "CategoryToggled",
    "ClearRequested",
    "Event",
    "FormatChanged",
    "LengthChanged",
    "ModeChanged",
    "NegativePromptToggled",
    "ProgressAnimation",
    "reduce",
    "CAPTION_FAILED_MESSAGE",
    "IntakeSequencer",
    "IntakeStatus",
]
