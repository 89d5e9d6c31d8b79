"""
Domain types for prompt synthesis.

Enum values are the display labels used in exports and settings snapshots.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class _LabeledEnum(Enum):
    """Enum whose value is its display label."""

    @classmethod
    def from_label(cls, label: str):
        """
        Resolve a member from its label or name (case-insensitive).

        :param label: Display label ("DALL-E") or member name ("DALLE")
        :raises ValueError: If nothing matches
        """
        wanted = (label or "").strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown {cls.__name__} '{label}'. Allowed: {allowed}")

    @property
    def label(self) -> str:
        return self.value


class ImageClassification(_LabeledEnum):
    PORTRAIT = "portrait"
    PRODUCT = "product"
    LANDSCAPE = "landscape"
    GENERAL = "general"


class Category(_LabeledEnum):
    """Analysis categories, in the order they contribute phrases."""
    SUBJECT_COMPOSITION = "Subject & Composition"
    LIGHTING_ATMOSPHERE = "Lighting & Atmosphere"
    STYLE_TECHNIQUE = "Style & Technique"
    TECHNICAL_DETAILS = "Technical Details"
    COLOR_MATERIALS = "Color & Materials"


class Mode(_LabeledEnum):
    BASIC = "Basic"
    DETAILED = "Detailed"
    TECHNICAL = "Technical"
    CREATIVE = "Creative"


class PromptLength(_LabeledEnum):
    SHORT = "Short"
    MEDIUM = "Medium"
    LONG = "Long"
    ULTRA_DETAILED = "Ultra-detailed"


class OutputFormat(_LabeledEnum):
    GENERIC = "Generic"
    MIDJOURNEY = "Midjourney"
    DALLE = "DALL-E"
    STABLE_DIFFUSION = "Stable Diffusion"


DEFAULT_CATEGORY_STATE: Dict[Category, bool] = {
    Category.SUBJECT_COMPOSITION: True,
    Category.LIGHTING_ATMOSPHERE: True,
    Category.STYLE_TECHNIQUE: True,
    Category.TECHNICAL_DETAILS: False,
    Category.COLOR_MATERIALS: True,
}

CATEGORY_ASPECTS: Dict[Category, List[str]] = {
    Category.SUBJECT_COMPOSITION: [
        "main subject", "secondary elements", "camera angle", "framing", "composition rules",
    ],
    Category.LIGHTING_ATMOSPHERE: [
        "light source", "shadows", "mood", "atmosphere", "color temperature",
    ],
    Category.STYLE_TECHNIQUE: [
        "art style", "medium", "genre", "artistic influences", "technique",
    ],
    Category.TECHNICAL_DETAILS: [
        "depth of field", "perspective", "focal length", "quality", "post-processing",
    ],
    Category.COLOR_MATERIALS: [
        "color palette", "materials", "textures", "surface properties", "finishes",
    ],
}

MODE_DESCRIPTIONS: Dict[Mode, str] = {
    Mode.BASIC: "Simple, concise prompt focusing on main elements",
    Mode.DETAILED: "Comprehensive analysis with specific details",
    Mode.TECHNICAL: "Camera settings, lighting setup, and technical aspects",
    Mode.CREATIVE: "Artistic interpretation with mood and style emphasis",
}


@dataclass(frozen=True)
class ImageRef:
    """
    Opaque handle to a loaded image.

    handle is the data URL for uploads or the sample handle ("sample-portrait").
    tag is only set for built-in samples.
    """
    handle: str
    tag: Optional[str] = None


@dataclass(frozen=True)
class PromptStats:
    word_count: int
    char_count: int

    @classmethod
    def of(cls, text: str) -> "PromptStats":
        return cls(word_count=len(text.split()), char_count=len(text))
