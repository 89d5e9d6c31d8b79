"""
Tests for the prompt synthesis engine.

Covers the rule table, classifier, each transform stage and the
end-to-end examples the output format must stay compatible with.
"""
import pytest

from image_prompt.models import (
    DEFAULT_CATEGORY_STATE,
    Category,
    ImageClassification,
    ImageRef,
    Mode,
    OutputFormat,
    PromptLength,
)
from image_prompt.synthesis import (
    NEGATIVE_TERMS,
    PromptSynthesizer,
    classify_image,
    generate_negative_prompt,
    phrases,
)

PORTRAIT_BASIC = (
    "professional portrait photography, elegant subject pose, rule of thirds composition, "
    "soft natural lighting, warm atmospheric mood"
)
MIDJOURNEY_SUFFIX = " --v 6 --style raw --ar 16:9 --q 2"
DALLE_PREFIX = "Create a high-quality image: "

ALL_ENABLED = {category: True for category in Category}


@pytest.fixture
def synthesizer():
    return PromptSynthesizer()


def segments(prompt):
    return prompt.split(", ")


class TestClassifier:
    """Test sample-tag classification."""

    @pytest.mark.parametrize("tag,expected", [
        ("sample-portrait", ImageClassification.PORTRAIT),
        ("sample-product", ImageClassification.PRODUCT),
        ("sample-landscape", ImageClassification.LANDSCAPE),
        ("sample-unknown", ImageClassification.GENERAL),
    ])
    def test_sample_tags(self, tag, expected):
        assert classify_image(ImageRef(handle=tag, tag=tag)) == expected

    def test_upload_is_general(self):
        """Uploads carry no tag, even if the handle mentions a sample."""
        image = ImageRef(handle="data:image/png;base64,sample-portrait")
        assert classify_image(image) == ImageClassification.GENERAL

    def test_portrait_wins_over_later_tags(self):
        tag = "sample-landscape sample-portrait"
        assert classify_image(ImageRef(handle=tag, tag=tag)) == ImageClassification.PORTRAIT


class TestRuleTable:
    """Test static phrase data."""

    def test_every_branch_has_two_to_four_phrases(self):
        for category in Category:
            for classification in ImageClassification:
                assert 2 <= len(phrases(category, classification)) <= 4

    def test_technical_details_ignores_classification(self):
        expected = phrases(Category.TECHNICAL_DETAILS, ImageClassification.GENERAL)
        assert expected == (
            "shallow depth of field", "tack sharp focus", "high resolution", "professional camera work",
        )
        for classification in ImageClassification:
            assert phrases(Category.TECHNICAL_DETAILS, classification) == expected

    def test_product_lighting_order(self):
        assert phrases(Category.LIGHTING_ATMOSPHERE, ImageClassification.PRODUCT) == (
            "studio lighting setup", "controlled illumination", "clean bright atmosphere",
        )


class TestAssemble:
    """Test phrase assembly across categories."""

    def test_declaration_order_regardless_of_map_order(self, synthesizer):
        reversed_map = {category: True for category in reversed(list(Category))}
        assert synthesizer.assemble(ImageClassification.PRODUCT, reversed_map) == \
            synthesizer.assemble(ImageClassification.PRODUCT, ALL_ENABLED)

    def test_disabled_categories_contribute_nothing(self, synthesizer):
        assert synthesizer.assemble(ImageClassification.GENERAL, {}) == []

    def test_category_independence(self, synthesizer):
        """Toggling one category adds or removes exactly its own block."""
        for classification in ImageClassification:
            full = synthesizer.assemble(classification, ALL_ENABLED)
            for category in Category:
                without = dict(ALL_ENABLED)
                without[category] = False
                block = set(phrases(category, classification))
                expected = [phrase for phrase in full if phrase not in block]
                assert synthesizer.assemble(classification, without) == expected


class TestModeTransform:

    def test_basic_keeps_five_segments(self, synthesizer):
        assert synthesizer.apply_mode("a, b, c, d, e, f, g", Mode.BASIC) == "a, b, c, d, e"

    def test_detailed_appends_four_phrases(self, synthesizer):
        result = synthesizer.apply_mode("a", Mode.DETAILED)
        assert result == "a, highly detailed, intricate details, fine art quality, masterful execution"

    def test_technical_appends_five_phrases(self, synthesizer):
        result = synthesizer.apply_mode("a", Mode.TECHNICAL)
        assert segments(result)[1:] == [
            "shot with professional DSLR", "perfect exposure", "precise focus",
            "technical excellence", "optimal camera settings",
        ]

    def test_creative_appends_five_phrases(self, synthesizer):
        result = synthesizer.apply_mode("a", Mode.CREATIVE)
        assert segments(result)[1:] == [
            "artistic vision", "creative composition", "expressive mood",
            "imaginative style", "emotional depth",
        ]


class TestLengthTransform:

    @pytest.mark.parametrize("length,count", [
        (PromptLength.SHORT, 4),
        (PromptLength.MEDIUM, 8),
        (PromptLength.LONG, 12),
    ])
    def test_truncation(self, synthesizer, length, count):
        prompt = ", ".join(f"p{i}" for i in range(20))
        assert len(segments(synthesizer.apply_length(prompt, length))) == count

    def test_ultra_detailed_appends(self, synthesizer):
        result = synthesizer.apply_length("a", PromptLength.ULTRA_DETAILED)
        assert result == (
            "a, extremely detailed, hyperrealistic, award-winning photography, "
            "masterpiece quality, perfect execution, professional grade, museum quality"
        )

    def test_short_input_is_unchanged(self, synthesizer):
        assert synthesizer.apply_length("a, b", PromptLength.LONG) == "a, b"

    def test_monotonic_prefixes(self, synthesizer):
        base = synthesizer.apply_mode(
            ", ".join(synthesizer.assemble(ImageClassification.GENERAL, ALL_ENABLED)),
            Mode.DETAILED,
        )
        assert len(segments(base)) >= 12

        short = segments(synthesizer.apply_length(base, PromptLength.SHORT))
        medium = segments(synthesizer.apply_length(base, PromptLength.MEDIUM))
        long_ = segments(synthesizer.apply_length(base, PromptLength.LONG))

        assert medium[:len(short)] == short and len(short) < len(medium)
        assert long_[:len(medium)] == medium and len(medium) < len(long_)


class TestFormatTransform:

    def test_generic_is_identity(self, synthesizer):
        assert synthesizer.apply_format("a, b", OutputFormat.GENERIC) == "a, b"

    def test_midjourney_suffix(self, synthesizer):
        assert synthesizer.apply_format("a", OutputFormat.MIDJOURNEY) == "a" + MIDJOURNEY_SUFFIX

    def test_dalle_prefix(self, synthesizer):
        assert synthesizer.apply_format("a", OutputFormat.DALLE) == DALLE_PREFIX + "a"

    def test_stable_diffusion_suffix(self, synthesizer):
        assert synthesizer.apply_format("a", OutputFormat.STABLE_DIFFUSION) == (
            "a, 8k uhd, dslr, soft lighting, high quality, film grain, Fujifilm XT3, photorealistic"
        )


class TestSynthesize:
    """End-to-end pipeline."""

    def test_portrait_basic_medium_generic(self, synthesizer):
        result = synthesizer.synthesize(
            ImageClassification.PORTRAIT, DEFAULT_CATEGORY_STATE,
            Mode.BASIC, PromptLength.MEDIUM, OutputFormat.GENERIC,
        )
        assert result == PORTRAIT_BASIC

    def test_portrait_basic_medium_midjourney(self, synthesizer):
        result = synthesizer.synthesize(
            ImageClassification.PORTRAIT, DEFAULT_CATEGORY_STATE,
            Mode.BASIC, PromptLength.MEDIUM, OutputFormat.MIDJOURNEY,
        )
        assert result == PORTRAIT_BASIC + MIDJOURNEY_SUFFIX

    def test_length_truncation_drops_mode_phrases(self, synthesizer):
        """Long keeps 12 segments from the front, so Detailed phrases fall off."""
        result = synthesizer.synthesize(
            ImageClassification.PORTRAIT, ALL_ENABLED,
            Mode.DETAILED, PromptLength.LONG, OutputFormat.GENERIC,
        )
        assert segments(result) == synthesizer.assemble(ImageClassification.PORTRAIT, ALL_ENABLED)[:12]
        assert "highly detailed" not in result

    def test_deterministic(self, synthesizer):
        args = (ImageClassification.LANDSCAPE, ALL_ENABLED, Mode.CREATIVE,
                PromptLength.ULTRA_DETAILED, OutputFormat.STABLE_DIFFUSION)
        assert len({synthesizer.synthesize(*args) for _ in range(5)}) == 1

    def test_dalle_always_prefixed(self, synthesizer):
        for mode in Mode:
            for length in PromptLength:
                result = synthesizer.synthesize(
                    ImageClassification.PRODUCT, DEFAULT_CATEGORY_STATE, mode, length, OutputFormat.DALLE,
                )
                assert result.startswith(DALLE_PREFIX)

    def test_no_categories_basic(self, synthesizer):
        result = synthesizer.synthesize(
            ImageClassification.GENERAL, {}, Mode.BASIC, PromptLength.MEDIUM, OutputFormat.GENERIC,
        )
        assert result == ""


class TestNegativePrompt:

    def test_fifteen_fixed_terms(self):
        assert len(NEGATIVE_TERMS) == 15
        assert NEGATIVE_TERMS[0] == "blurry"
        assert NEGATIVE_TERMS[-1] == "watermark"

    def test_stable_output(self):
        assert generate_negative_prompt() == generate_negative_prompt()
        assert generate_negative_prompt().startswith("blurry, low quality, distorted")
