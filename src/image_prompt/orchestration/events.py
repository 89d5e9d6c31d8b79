"""
Option events dispatched into the reducer.

Image intake is not an event here; it goes through the IntakeSequencer because
it suspends.
"""
from dataclasses import dataclass

from ..models import Category, Mode, OutputFormat, PromptLength


@dataclass(frozen=True)
class Event:
    pass


@dataclass(frozen=True)
class CategoryToggled(Event):
    category: Category
    enabled: bool


@dataclass(frozen=True)
class ModeChanged(Event):
    mode: Mode


@dataclass(frozen=True)
class LengthChanged(Event):
    length: PromptLength


@dataclass(frozen=True)
class FormatChanged(Event):
    output_format: OutputFormat


@dataclass(frozen=True)
class NegativePromptToggled(Event):
    enabled: bool


@dataclass(frozen=True)
class ClearRequested(Event):
    pass
