"""
Helpers for naming, writing and previewing summary records.
"""

import re
import time
from pathlib import Path
from typing import Optional, Union

from yt_summary.models.schemas import VideoMedia, VideoSummary

_UNSAFE_CHARS = re.compile(r'[\\/*?:"<>|\s]+')


def summary_filename(media: VideoMedia, timestamp: Optional[str] = None) -> str:
    """
    Build the JSON file name for a video's summary.

    The video id is preferred over the title; unsafe characters and
    whitespace runs become a single underscore.

    Args:
        media: Video metadata
        timestamp: Overrides the current time (``%Y%m%d_%H%M%S``)

    Returns:
        A name like ``V3TUEeB0kW0_20240101_120000_summary.json``
    """
    stem = _UNSAFE_CHARS.sub("_", media.video_id or media.title).strip("_")[:100]
    timestamp = timestamp or time.strftime("%Y%m%d_%H%M%S")
    return f"{stem or 'video'}_{timestamp}_summary.json"


def write_summary_json(summary: VideoSummary, path: Union[str, Path]) -> Path:
    """Write a summary record as indented UTF-8 JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(summary.model_dump_json(indent=2), encoding="utf-8")
    return path


def preview_text(text: str, max_length: int = 100) -> str:
    """One-line preview of subtitle text for debug logs."""
    flat = " ".join(text.split())
    if len(flat) <= max_length:
        return flat
    return flat[:max_length - 3] + "..."
