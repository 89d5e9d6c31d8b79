from typing import Tuple

NEGATIVE_TERMS: Tuple[str, ...] = (
    "blurry", "low quality", "distorted", "poorly lit", "overexposed",
    "underexposed", "noise", "artifacts", "bad composition", "amateur",
    "pixelated", "grainy", "out of focus", "cropped badly", "watermark",
)


def generate_negative_prompt() -> str:
    """Join the fixed negative terms; independent of image and options."""
    return ", ".join(NEGATIVE_TERMS)
