"""
Module for splitting subtitle text into fixed-size chunks.
"""

from typing import List

from yt_summary.models.schemas import Chunk
from yt_summary.utils.error_handling import ConfigurationError


class TextChunker:
    """Splits text into contiguous, non-overlapping chunks of a fixed size."""

    def split(self, text: str, chunk_size: int) -> List[Chunk]:
        """
        Split text into chunks.

        Every chunk except the last holds exactly chunk_size characters;
        joining the chunks in order gives back the original text.

        Args:
            text: Text to split (may be empty)
            chunk_size: Number of characters per chunk

        Returns:
            Chunks in index order
        """
        if chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be at least 1, got {chunk_size}")

        total_chunks = (len(text) + chunk_size - 1) // chunk_size
        return [
            Chunk(index=i, start=i * chunk_size, content=text[i * chunk_size:(i + 1) * chunk_size])
            for i in range(total_chunks)
        ]
