"""
Module for summarizing subtitle text, splitting it into chunks when it is too long.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

from yt_summary.core.chunker import TextChunker
from yt_summary.core.clients import SummarizationClient
from yt_summary.models.schemas import Chunk, PartialSummary, SummaryConfig
from yt_summary.utils.error_handling import CompletionFailure, SummarizationFailure
from yt_summary.utils.logger import logging


class ChunkedSummarizer:
    """Summarizes text directly, or chunk by chunk followed by a consolidation pass."""

    def __init__(
        self,
        client: SummarizationClient,
        config: SummaryConfig,
        chunker: Optional[TextChunker] = None,
    ):
        """
        Initialize the summarizer.

        Args:
            client: Completion backend
            config: Immutable run settings
            chunker: Text splitter (a TextChunker by default)
        """
        self.client = client
        self.config = config
        self.chunker = chunker or TextChunker()

    def summarize_text(self, text: str, prompt: Optional[str] = None) -> str:
        """
        Summarize a text.

        Texts longer than max_chunk_size are split into chunk_size pieces,
        each piece is summarized with the chunk prompt, and the labeled
        partial summaries are merged by one final call.

        Args:
            text: Subtitle text
            prompt: Final summarization prompt (defaults to config.prompt)

        Returns:
            The final summary

        Raises:
            SummarizationFailure: any required completion call failed
        """
        prompt = prompt if prompt is not None else self.config.prompt
        logging.info(f"Text length: {len(text)} characters")

        if len(text) <= self.config.max_chunk_size:
            logging.info("Summarizing with AI")
            try:
                return self.client.summarize(text, prompt)
            except CompletionFailure as e:
                raise SummarizationFailure(f"Failed to summarize text: {e}") from e

        return self._summarize_chunked(text, prompt)

    def _summarize_chunked(self, text: str, prompt: str) -> str:
        chunks = self.chunker.split(text, self.config.chunk_size)
        logging.info(f"Text too long, creating staged summary with {len(chunks)} chunks")

        if self.config.max_workers > 1 and len(chunks) > 1:
            partials = self._summarize_chunks_concurrently(chunks)
        else:
            partials = [self._summarize_chunk(chunk, len(chunks)) for chunk in chunks]

        joined = "\n\n".join(partial.label for partial in partials)

        logging.info("Creating final summary from chunks")
        try:
            return self.client.summarize(joined, f"{prompt} {self.config.consolidation_suffix}")
        except CompletionFailure as e:
            raise SummarizationFailure(
                f"Failed to consolidate chunk summaries: {e}", stage="consolidation"
            ) from e

    def _summarize_chunk(self, chunk: Chunk, total_chunks: int) -> PartialSummary:
        logging.info(f"Processing chunk {chunk.display_index}/{total_chunks}")
        try:
            summary = self.client.summarize(chunk.content, self.config.chunk_prompt)
        except CompletionFailure as e:
            logging.error(f"Failed to summarize chunk {chunk.display_index}")
            raise SummarizationFailure(
                f"Failed to summarize chunk {chunk.display_index}: {e}",
                chunk_index=chunk.display_index,
                stage="chunk",
            ) from e
        return PartialSummary(chunk_index=chunk.display_index, summary=summary)

    def _summarize_chunks_concurrently(self, chunks: List[Chunk]) -> List[PartialSummary]:
        # Results are slotted by chunk index so completion order does not matter
        partials: List[Optional[PartialSummary]] = [None] * len(chunks)

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self._summarize_chunk, chunk, len(chunks)): chunk
                for chunk in chunks
            }
            for future in as_completed(futures):
                try:
                    partials[futures[future].index] = future.result()
                except SummarizationFailure:
                    for pending in futures:
                        pending.cancel()
                    raise

        return partials
