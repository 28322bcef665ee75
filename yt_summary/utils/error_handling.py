"""
Centralized error types and diagnostic helpers for the application.
"""

import json
from logging import DEBUG
from typing import Optional, Dict, Any

from yt_summary.utils.logger import logging


class YTSummaryError(Exception):
    """Base class for every error raised by the application."""


class ConfigurationError(YTSummaryError, ValueError):
    """Invalid configuration value, detected before any work starts."""


class SubtitleError(YTSummaryError):
    """Subtitle acquisition or extraction failed."""


class SubtitleNotFoundError(SubtitleError):
    """No subtitle track exists for the requested language."""


class SubtitleDownloadError(SubtitleError):
    """The downloader failed or did not produce a subtitle file."""


class SubtitleExtractionError(SubtitleError):
    """The subtitle file could not be read or parsed."""


class CompletionFailure(YTSummaryError):
    """A single call to the completion backend produced no output."""


class SummarizationFailure(YTSummaryError):
    """
    Raised when a summarization run cannot complete.

    Attributes:
        chunk_index: 1-based index of the failing chunk, or None when the
            direct or consolidation call failed
        stage: "direct", "chunk" or "consolidation"
    """

    def __init__(self, message: str, chunk_index: Optional[int] = None, stage: str = "direct"):
        super().__init__(message)
        self.chunk_index = chunk_index
        self.stage = stage


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Only emitted when the logger is enabled for DEBUG records.

    Args:
        context: Dictionary of diagnostic information
    """
    if not logging.isEnabledFor(DEBUG):
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, default=str, ensure_ascii=False)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
