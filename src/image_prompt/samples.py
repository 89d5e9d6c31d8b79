"""
Built-in sample images.

Samples carry a tag that drives classification and a canned caption, so the
sample path never calls a caption source.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import ImageRef


@dataclass(frozen=True)
class SamplePrompt:
    title: str
    prompt: str


SAMPLE_PROMPTS: Tuple[SamplePrompt, ...] = (
    SamplePrompt(
        title="Portrait Example",
        prompt=(
            "A cinematic portrait of a young woman with flowing auburn hair, shot during golden hour "
            "with warm, soft lighting creating rim light around her silhouette, shallow depth of field "
            "with bokeh background, film photography aesthetic, professional headshot style, natural "
            "makeup, serene expression"
        ),
    ),
    SamplePrompt(
        title="Product Example",
        prompt=(
            "A photorealistic product shot of a luxury smartwatch on white marble surface, studio "
            "lighting with key light and fill light, reflective metal band, clean minimalist "
            "composition, high-end commercial photography style, sharp focus, neutral background"
        ),
    ),
    SamplePrompt(
        title="Landscape Example",
        prompt=(
            "A dramatic landscape photograph of mountain peaks during sunrise, misty valleys below, "
            "warm orange and pink sky, wide-angle composition, natural lighting, high contrast, "
            "landscape photography, majestic atmosphere, detailed textures"
        ),
    ),
)

SAMPLE_TYPES = ("portrait", "product", "landscape")


def find_sample(sample_type: str) -> Optional[SamplePrompt]:
    """Find a sample whose title contains the sample type."""
    wanted = (sample_type or "").strip().lower()
    if not wanted:
        return None
    for sample in SAMPLE_PROMPTS:
        if wanted in sample.title.lower():
            return sample
    return None


def sample_image_ref(sample_type: str) -> ImageRef:
    handle = f"sample-{sample_type.strip().lower()}"
    return ImageRef(handle=handle, tag=handle)
