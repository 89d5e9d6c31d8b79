"""
Session state domain object.

Pure domain model - no I/O, no caption backend, no rendering.
Single owner: the service facade. Written by option events and successful
intake, read by the synthesizer.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models import (
    DEFAULT_CATEGORY_STATE,
    Category,
    ImageRef,
    Mode,
    OutputFormat,
    PromptLength,
    PromptStats,
)


def _default_categories() -> Dict[Category, bool]:
    return dict(DEFAULT_CATEGORY_STATE)


@dataclass
class SessionState:
    """Session state - single source of truth for the current session."""
    image: Optional[ImageRef] = None
    categories: Dict[Category, bool] = field(default_factory=_default_categories)
    mode: Mode = Mode.BASIC
    length: PromptLength = PromptLength.MEDIUM
    output_format: OutputFormat = OutputFormat.GENERIC
    generate_negative_prompt: bool = False
    caption: str = ""
    current_prompt: str = ""
    current_negative_prompt: str = ""

    def has_image(self) -> bool:
        """Check if an image is loaded for synthesis."""
        return self.image is not None

    def install_image(self, image: ImageRef, caption: str) -> None:
        """Install a successfully analysed image and its caption seed."""
        self.image = image
        self.caption = caption
        self.current_prompt = caption

    def clear_image(self) -> None:
        """Discard image, caption, prompt and negative prompt; keep options."""
        self.image = None
        self.caption = ""
        self.current_prompt = ""
        self.current_negative_prompt = ""

    def set_category(self, category: Category, enabled: bool) -> None:
        self.categories[category] = enabled

    def enabled_categories(self) -> List[Category]:
        return [category for category in Category if self.categories.get(category)]

    def prompt_stats(self) -> PromptStats:
        return PromptStats.of(self.current_prompt)

    def categories_by_label(self) -> Dict[str, bool]:
        """Category map keyed by display label, in declaration order."""
        return {category.label: bool(self.categories.get(category)) for category in Category}
