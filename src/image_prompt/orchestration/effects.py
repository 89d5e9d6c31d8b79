"""
Render instructions emitted by handlers.

Handlers never touch a UI; they return or emit these and a display adapter
applies them.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from ..models import ImageRef, PromptStats

PLACEHOLDER_TEXT = "Upload an image or select a sample to generate a detailed prompt description."


@dataclass(frozen=True)
class Effect:
    pass


@dataclass(frozen=True)
class ShowImage(Effect):
    image: ImageRef


@dataclass(frozen=True)
class ShowProgress(Effect):
    percent: float


@dataclass(frozen=True)
class HideProgress(Effect):
    pass


@dataclass(frozen=True)
class ShowAnalysisComplete(Effect):
    pass


@dataclass(frozen=True)
class RenderPrompt(Effect):
    text: str
    word_count: int
    char_count: int

    @classmethod
    def of(cls, text: str) -> "RenderPrompt":
        stats = PromptStats.of(text)
        return cls(text=text, word_count=stats.word_count, char_count=stats.char_count)


@dataclass(frozen=True)
class RenderNegativePrompt(Effect):
    """text is None when the negative prompt section should be hidden."""
    text: Optional[str]


@dataclass(frozen=True)
class ResetView(Effect):
    placeholder: str = PLACEHOLDER_TEXT


@dataclass(frozen=True)
class ShowError(Effect):
    message: str


@dataclass(frozen=True)
class ShowSuccess(Effect):
    message: str


EffectSink = Callable[[Effect], None]


class Renderer(Protocol):
    """Protocol for a display adapter."""
    def render(self, effect: Effect) -> None:
        ...


class EffectRecorder:
    """Renderer that keeps every effect it receives, in order."""

    def __init__(self):
        self.effects: List[Effect] = []

    def render(self, effect: Effect) -> None:
        self.effects.append(effect)

    def of_type(self, effect_type) -> List[Effect]:
        return [effect for effect in self.effects if isinstance(effect, effect_type)]

    def clear(self) -> None:
        self.effects.clear()
