"""
Category rule table.

Static phrase data keyed by (category, classification). Phrase order is part
of the output contract.
"""
from typing import Dict, Tuple

from ..models import Category, ImageClassification

Phrases = Tuple[str, ...]

TECHNICAL_PHRASES: Phrases = (
    "shallow depth of field",
    "tack sharp focus",
    "high resolution",
    "professional camera work",
)

RULE_TABLE: Dict[Category, Dict[ImageClassification, Phrases]] = {
    Category.SUBJECT_COMPOSITION: {
        ImageClassification.PORTRAIT: (
            "professional portrait photography", "elegant subject pose", "rule of thirds composition",
        ),
        ImageClassification.PRODUCT: (
            "commercial product photography", "clean composition", "centered subject",
        ),
        ImageClassification.LANDSCAPE: (
            "landscape photography", "wide composition", "natural framing",
        ),
        ImageClassification.GENERAL: (
            "well-composed subject", "balanced composition",
        ),
    },
    Category.LIGHTING_ATMOSPHERE: {
        ImageClassification.PORTRAIT: (
            "soft natural lighting", "warm atmospheric mood", "golden hour ambiance",
        ),
        ImageClassification.PRODUCT: (
            "studio lighting setup", "controlled illumination", "clean bright atmosphere",
        ),
        ImageClassification.LANDSCAPE: (
            "dramatic natural lighting", "atmospheric perspective", "dynamic sky",
        ),
        ImageClassification.GENERAL: (
            "natural lighting", "balanced exposure",
        ),
    },
    Category.STYLE_TECHNIQUE: {
        ImageClassification.PORTRAIT: (
            "contemporary portrait style", "fine art photography", "professional technique",
        ),
        ImageClassification.PRODUCT: (
            "commercial photography style", "minimalist aesthetic", "professional quality",
        ),
        ImageClassification.LANDSCAPE: (
            "fine art landscape style", "nature photography", "artistic vision",
        ),
        ImageClassification.GENERAL: (
            "professional photography style", "artistic technique",
        ),
    },
    Category.TECHNICAL_DETAILS: {
        classification: TECHNICAL_PHRASES for classification in ImageClassification
    },
    Category.COLOR_MATERIALS: {
        ImageClassification.PORTRAIT: (
            "natural skin tones", "harmonious color palette", "soft textures",
        ),
        ImageClassification.PRODUCT: (
            "accurate colors", "premium materials", "reflective surfaces",
        ),
        ImageClassification.LANDSCAPE: (
            "vibrant natural colors", "organic textures", "rich earth tones",
        ),
        ImageClassification.GENERAL: (
            "rich color palette", "detailed textures",
        ),
    },
}


def phrases(category: Category, classification: ImageClassification) -> Phrases:
    """Return the ordered phrases a category contributes for a classification."""
    return RULE_TABLE[category][classification]
