"""
YouTube Subtitle Summarizer.

Downloads the auto-generated subtitles of a video, extracts their text and
summarizes it with an AI completion backend, in chunks when the text is long.
"""

from yt_summary.config import config as _config

__version__ = _config.APP_VERSION
