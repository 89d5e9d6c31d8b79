"""
Prompt synthesizer.

Pipeline: assemble phrases per enabled category -> mode transform ->
length transform -> format transform. Each stage works on the ", "-joined
string so output stays byte-compatible with existing prompts, including the
case where length truncation drops phrases the mode stage appended.
"""
import logging
from typing import List, Mapping, Optional, Sequence

from ..models import Category, ImageClassification, Mode, OutputFormat, PromptLength
from .classifier import classify_image
from .rule_table import phrases

logger = logging.getLogger(__name__)

SEPARATOR = ", "

MODE_SUFFIXES = {
    Mode.DETAILED: (
        "highly detailed", "intricate details", "fine art quality", "masterful execution",
    ),
    Mode.TECHNICAL: (
        "shot with professional DSLR", "perfect exposure", "precise focus",
        "technical excellence", "optimal camera settings",
    ),
    Mode.CREATIVE: (
        "artistic vision", "creative composition", "expressive mood",
        "imaginative style", "emotional depth",
    ),
}
BASIC_SEGMENT_LIMIT = 5

LENGTH_LIMITS = {
    PromptLength.SHORT: 4,
    PromptLength.MEDIUM: 8,
    PromptLength.LONG: 12,
}
ULTRA_DETAILED_SUFFIX = (
    "extremely detailed", "hyperrealistic", "award-winning photography",
    "masterpiece quality", "perfect execution", "professional grade", "museum quality",
)

MIDJOURNEY_SUFFIX = " --v 6 --style raw --ar 16:9 --q 2"
DALLE_PREFIX = "Create a high-quality image: "
STABLE_DIFFUSION_SUFFIX = (
    ", 8k uhd, dslr, soft lighting, high quality, film grain, Fujifilm XT3, photorealistic"
)


def _keep_segments(prompt: str, count: int) -> str:
    return SEPARATOR.join(prompt.split(SEPARATOR)[:count])


def _append(prompt: str, extra: Sequence[str]) -> str:
    return prompt + SEPARATOR + SEPARATOR.join(extra)


class PromptSynthesizer:
    """
    Deterministic prompt builder.

    Stateless: the same inputs always yield the same string.
    """

    def assemble(
        self,
        classification: ImageClassification,
        categories: Mapping[Category, bool],
    ) -> List[str]:
        """
        Collect phrases for every enabled category in declaration order.

        The iteration order of ``categories`` does not matter.
        """
        parts: List[str] = []
        for category in Category:
            if categories.get(category, False):
                parts.extend(phrases(category, classification))
        return parts

    def apply_mode(self, prompt: str, mode: Mode) -> str:
        if mode is Mode.BASIC:
            return _keep_segments(prompt, BASIC_SEGMENT_LIMIT)
        return _append(prompt, MODE_SUFFIXES[mode])

    def apply_length(self, prompt: str, length: PromptLength) -> str:
        if length is PromptLength.ULTRA_DETAILED:
            return _append(prompt, ULTRA_DETAILED_SUFFIX)
        return _keep_segments(prompt, LENGTH_LIMITS[length])

    def apply_format(self, prompt: str, output_format: OutputFormat) -> str:
        if output_format is OutputFormat.MIDJOURNEY:
            return prompt + MIDJOURNEY_SUFFIX
        if output_format is OutputFormat.DALLE:
            return DALLE_PREFIX + prompt
        if output_format is OutputFormat.STABLE_DIFFUSION:
            return prompt + STABLE_DIFFUSION_SUFFIX
        return prompt

    def synthesize(
        self,
        classification: ImageClassification,
        categories: Mapping[Category, bool],
        mode: Mode,
        length: PromptLength,
        output_format: OutputFormat,
    ) -> str:
        """
        Run the full pipeline.

        :return: Final prompt text
        """
        prompt = SEPARATOR.join(self.assemble(classification, categories))
        prompt = self.apply_mode(prompt, mode)
        prompt = self.apply_length(prompt, length)
        return self.apply_format(prompt, output_format)

    def synthesize_state(self, state) -> Optional[str]:
        """
        Synthesize from a SessionState and store the result on it.

        :return: The new prompt, or None when no image is loaded
        """
        if not state.has_image():
            return None

        prompt = self.synthesize(
            classify_image(state.image),
            state.categories,
            state.mode,
            state.length,
            state.output_format,
        )
        state.current_prompt = prompt
        logger.debug(
            f"Synthesized prompt ({state.mode.label}/{state.length.label}/"
            f"{state.output_format.label}): {prompt}"
        )
        return prompt
