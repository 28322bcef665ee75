"""
Data models for the subtitle summarizer application.
"""
import re
import time
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from yt_summary.config import config

_URL_PATTERN = re.compile(r"^https?://")


class SubtitleRequest(BaseModel):
    """Parameters of one subtitle download."""
    url: str
    lang: str = config.DEFAULT_LANG
    sub_format: str = config.DEFAULT_FORMAT
    output_directory: Optional[str] = None

    @field_validator('url')
    def validate_url(cls, v):
        if not _URL_PATTERN.match(v):
            raise ValueError(f'Invalid URL: {v}')
        return v


class VideoMedia(BaseModel):
    """Video metadata and the downloaded subtitle file."""
    video_id: str = ""
    title: str = ""
    author: str = ""
    url: Optional[str] = None
    subtitle_path: Optional[str] = None

    model_config = {"from_attributes": True}


class SummaryConfig(BaseModel):
    """Immutable settings for one summarization run."""
    prompt: str = config.DEFAULT_PROMPT
    chunk_prompt: str = config.CHUNK_PROMPT
    consolidation_suffix: str = config.CONSOLIDATION_SUFFIX
    max_chunk_size: int = Field(default=15000, gt=0)
    chunk_size: int = Field(default=10000, gt=0)
    max_workers: int = Field(default=1, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_app_config(cls, app_config=config, prompt: Optional[str] = None) -> "SummaryConfig":
        """Build the run settings from the environment-driven application config."""
        return cls(
            prompt=prompt if prompt is not None else app_config.DEFAULT_PROMPT,
            chunk_prompt=app_config.CHUNK_PROMPT,
            consolidation_suffix=app_config.CONSOLIDATION_SUFFIX,
            max_chunk_size=app_config.MAX_CHUNK_SIZE,
            chunk_size=app_config.CHUNK_SIZE,
            max_workers=app_config.MAX_WORKERS,
        )


class Chunk(BaseModel):
    """A contiguous slice of the subtitle text."""
    index: int
    start: int
    content: str

    model_config = {"frozen": True}

    @property
    def display_index(self) -> int:
        return self.index + 1


class PartialSummary(BaseModel):
    """Summary of one chunk, tagged with the chunk's 1-based index."""
    chunk_index: int
    summary: str

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"Chunk {self.chunk_index}: {self.summary}"


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    media_info: VideoMedia
    summary: str
    transcript_text: Optional[str] = None
    text_length: int = 0
    chunked: bool = False
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
