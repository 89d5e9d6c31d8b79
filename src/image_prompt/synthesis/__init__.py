"""
Prompt synthesis engine: classifier, rule table, synthesizer, negative prompt.
"""
from .classifier import classify_image
from .negative import NEGATIVE_TERMS, generate_negative_prompt
from .rule_table import RULE_TABLE, phrases
from .synthesizer import PromptSynthesizer

__all__ = [
    "classify_image",
    "NEGATIVE_TERMS",
    "generate_negative_prompt",
    "RULE_TABLE",
    "phrases",
    "PromptSynthesizer",
]
