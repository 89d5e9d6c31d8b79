from ..models import ImageClassification, ImageRef

# Checked in order; first substring match wins.
SAMPLE_TAGS = (
    ("sample-portrait", ImageClassification.PORTRAIT),
    ("sample-product", ImageClassification.PRODUCT),
    ("sample-landscape", ImageClassification.LANDSCAPE),
)


def classify_image(image: ImageRef) -> ImageClassification:
    """Classify an image from its sample tag; uploads are always GENERAL."""
    tag = image.tag or ""
    for sample_tag, classification in SAMPLE_TAGS:
        if sample_tag in tag:
            return classification
    return ImageClassification.GENERAL
