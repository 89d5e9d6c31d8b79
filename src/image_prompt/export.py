"""
Export and clipboard payloads built from the session state.
"""
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .context.session_state import SessionState
from .schemas import PromptExport, PromptSettings

logger = logging.getLogger(__name__)

COPY_SUCCESS_MESSAGE = "Prompt copied to clipboard!"
EXPORT_SUCCESS_MESSAGE = "Prompt exported successfully!"
NEGATIVE_PROMPT_LABEL = "Negative Prompt: "


def _utc_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_export(state: SessionState, now: Optional[datetime] = None) -> PromptExport:
    """
    Snapshot prompt, negative prompt and settings.

    negative_prompt is None unless the negative prompt flag is on.
    """
    return PromptExport(
        prompt=state.current_prompt,
        negative_prompt=state.current_negative_prompt if state.generate_negative_prompt else None,
        settings=PromptSettings(
            mode=state.mode.label,
            length=state.length.label,
            format=state.output_format.label,
            categories=state.categories_by_label(),
        ),
        timestamp=_utc_timestamp(now),
    )


def export_filename(epoch_ms: Optional[int] = None) -> str:
    if epoch_ms is None:
        epoch_ms = int(time.time() * 1000)
    return f"prompt-export-{epoch_ms}.json"


def write_export(export: PromptExport, directory) -> Path:
    """Write an export document into directory and return its path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename()
    path.write_text(export.to_json(), encoding="utf-8")
    logger.info(f"Prompt exported to {path}")
    return path


def clipboard_text(state: SessionState) -> str:
    """Prompt text, plus a labelled negative prompt section when enabled."""
    if state.generate_negative_prompt:
        return f"{state.current_prompt}\n\n{NEGATIVE_PROMPT_LABEL}{state.current_negative_prompt}"
    return state.current_prompt
