#!/usr/bin/env python3
"""
CLI demo for Image Prompt Service.

Runs one image (a file or a built-in sample) through intake and synthesis and
prints the render instructions as they arrive.

    python demo/cli_demo.py --sample portrait --mode Detailed --format Midjourney
    python demo/cli_demo.py --image photo.jpg --negative
"""
import argparse
import asyncio
import logging

from image_prompt.app import ImagePromptApp
from image_prompt.config_loader import load_config_from_env
from image_prompt.models import (
    CATEGORY_ASPECTS,
    MODE_DESCRIPTIONS,
    Category,
    Mode,
    OutputFormat,
    PromptLength,
)
from image_prompt.orchestration.effects import (
    Effect,
    RenderNegativePrompt,
    RenderPrompt,
    ShowError,
    ShowProgress,
    ShowSuccess,
)
from image_prompt.samples import SAMPLE_TYPES


class ConsoleRenderer:
    """Prints effects to the terminal."""

    def render(self, effect: Effect) -> None:
        if isinstance(effect, ShowProgress):
            print(f"  analysing... {effect.percent:5.1f}%")
        elif isinstance(effect, RenderPrompt):
            print(f"\n📝 Prompt ({effect.word_count} words, {effect.char_count} characters):")
            print(f"   {effect.text}")
        elif isinstance(effect, RenderNegativePrompt) and effect.text:
            print(f"🚫 Negative prompt: {effect.text}")
        elif isinstance(effect, ShowError):
            print(f"❌ {effect.message}")
        elif isinstance(effect, ShowSuccess):
            print(f"✅ {effect.message}")


def parse_args():
    parser = argparse.ArgumentParser(description="Generate an image prompt from an image")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--image", help="Path to an image file")
    source.add_argument("--sample", choices=SAMPLE_TYPES, help="Built-in sample")
    parser.add_argument("--mode", choices=[m.label for m in Mode])
    parser.add_argument("--length", choices=[length.label for length in PromptLength])
    parser.add_argument("--format", dest="output_format", choices=[f.label for f in OutputFormat])
    parser.add_argument("--technical", action="store_true", help="Enable Technical Details")
    parser.add_argument("--negative", action="store_true", help="Also generate a negative prompt")
    parser.add_argument("--export-dir", help="Write a JSON export into this directory")
    parser.add_argument("--list", action="store_true", help="List modes and categories, then exit")
    args = parser.parse_args()
    if not (args.list or args.image or args.sample):
        parser.error("one of --image, --sample or --list is required")
    return args


def print_catalog():
    print("Modes:")
    for mode in Mode:
        print(f"  {mode.label:<10} {MODE_DESCRIPTIONS[mode]}")
    print("\nCategories:")
    for category in Category:
        print(f"  {category.label:<24} {', '.join(CATEGORY_ASPECTS[category])}")


async def run(args) -> int:
    if args.list:
        print_catalog()
        return 0

    config = load_config_from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    app = ImagePromptApp(config, renderer=ConsoleRenderer())
    app.initialize()

    # Options before intake: synthesis runs once the image is ready
    if args.mode:
        app.set_mode(args.mode)
    if args.length:
        app.set_length(args.length)
    if args.output_format:
        app.set_format(args.output_format)
    if args.technical:
        app.toggle_category(Category.TECHNICAL_DETAILS, True)
    if args.negative:
        app.set_negative_prompt(True)

    if args.sample:
        ok = await app.load_sample(args.sample)
    else:
        ok = await app.load_image_file(args.image)

    if not ok:
        return 1

    if args.export_dir:
        app.export_prompt(args.export_dir)
    return 0


def main():
    raise SystemExit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
