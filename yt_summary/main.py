"""
Main entry point for the YouTube Subtitle Summarizer application.
"""

import argparse
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import ValidationError

from yt_summary.models.schemas import SubtitleRequest, SummaryConfig, VideoMedia, VideoSummary
from yt_summary.core.subtitles import SubtitleDownloader, extract_subtitle_text
from yt_summary.core.clients import SummarizationClient, build_client
from yt_summary.core.summarizer import ChunkedSummarizer
from yt_summary.config import config
from yt_summary.utils.error_handling import (
    SubtitleExtractionError,
    YTSummaryError,
    log_diagnostic_info,
)
from yt_summary.utils.helpers import preview_text, summary_filename, write_summary_json
from yt_summary.utils.logger import logging, setup_logging

EPILOG = """\
Environment Variables:
  YT_SUMMARY_LANG            Default subtitle language
  YT_SUMMARY_FORMAT          Default subtitle format
  YT_SUMMARY_PROMPT          Default summarization prompt
  YT_SUMMARY_MAX_CHUNK_SIZE  Maximum text size before chunking (default: 15000)
  YT_SUMMARY_CHUNK_SIZE      Size of each chunk when splitting (default: 10000)
  YT_SUMMARY_MAX_WORKERS     Chunks summarized in parallel (default: 1)
  YT_SUMMARY_BACKEND         Completion backend: aichat, langchain (default: aichat)
  YT_SUMMARY_LOG_LEVEL       Log level: quiet, error, info, debug (default: info)

Examples:
  yt-summary "https://youtube.com/watch?v=VIDEO_ID"
  yt-summary "https://youtube.com/watch?v=VIDEO_ID" "ja"
  YT_SUMMARY_LOG_LEVEL=debug yt-summary "https://youtube.com/watch?v=VIDEO_ID"
"""


def check_dependencies(app_config=config, backend: Optional[str] = None) -> List[str]:
    """
    Report what the selected completion backend is missing.

    Args:
        app_config: Application configuration
        backend: Overrides app_config.BACKEND when given

    Returns:
        Human-readable names of missing dependencies (empty when ready)
    """
    backend = backend or app_config.BACKEND
    missing = []
    if backend == "aichat" and shutil.which(app_config.AICHAT_PATH) is None:
        missing.append(app_config.AICHAT_PATH)
    if (backend == "langchain" and app_config.MODEL_PROVIDER == "groq"
            and not app_config.GROQ_API_KEY):
        missing.append("GROQ_API_KEY")
    return missing


def save_summary(summary: VideoSummary, output_file: Optional[str] = None) -> Path:
    """Save the summary to a JSON file."""
    if output_file is None:
        output_file = Path(config.SUMMARIES_DIR) / summary_filename(summary.media_info)

    output_file = write_summary_json(summary, output_file)
    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(
    url: str,
    lang: str = config.DEFAULT_LANG,
    sub_format: str = config.DEFAULT_FORMAT,
    prompt: Optional[str] = None,
    output_file: Optional[str] = None,
    client: Optional[SummarizationClient] = None,
    summary_config: Optional[SummaryConfig] = None,
    on_media: Optional[Callable[[VideoMedia], None]] = None,
) -> VideoSummary:
    """
    Process a video: download its subtitles, extract the text, and summarize it.

    Args:
        url: Video URL
        lang: Subtitle language
        sub_format: Subtitle format
        prompt: Summarization prompt (defaults to the configured prompt)
        output_file: Optional file path to save the summary as JSON
        client: Completion backend (built from the config when omitted)
        summary_config: Run settings (built from the config when omitted)
        on_media: Called with the video metadata as soon as the subtitles are downloaded

    Returns:
        VideoSummary object
    """
    summary_config = summary_config or SummaryConfig.from_app_config(config, prompt=prompt)
    prompt = prompt if prompt is not None else summary_config.prompt

    with tempfile.TemporaryDirectory(prefix="yt-summary-") as tmpdir:
        logging.debug(f"Working directory: {tmpdir}")
        request = SubtitleRequest(url=url, lang=lang, sub_format=sub_format, output_directory=tmpdir)

        downloader = SubtitleDownloader(request)
        media = downloader.download()
        if on_media is not None:
            on_media(media)
        transcript_text = extract_subtitle_text(media.subtitle_path)

    if not transcript_text:
        raise SubtitleExtractionError("Subtitle file contains no text")
    logging.debug(f"Subtitle text: {preview_text(transcript_text)}")

    summarizer = ChunkedSummarizer(client or build_client(config), summary_config)
    summary_text = summarizer.summarize_text(transcript_text, prompt)

    summary = VideoSummary(
        media_info=media,
        summary=summary_text,
        transcript_text=transcript_text,
        text_length=len(transcript_text),
        chunked=len(transcript_text) > summary_config.max_chunk_size,
    )

    if output_file:
        save_summary(summary, output_file)

    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-summary",
        description="Download YouTube subtitles and generate AI-powered summary.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument("lang", nargs="?", default=config.DEFAULT_LANG,
                        help=f"Subtitle language (default: {config.DEFAULT_LANG})")
    parser.add_argument("format", nargs="?", default=config.DEFAULT_FORMAT,
                        help=f"Subtitle format (default: {config.DEFAULT_FORMAT})")
    parser.add_argument("prompt", nargs="?", default=None,
                        help="AI summarization prompt (default: YT_SUMMARY_PROMPT)")
    parser.add_argument("--output", help="Also save the summary as JSON to this file")
    parser.add_argument("--backend", choices=["aichat", "langchain"],
                        help="Completion backend (default: YT_SUMMARY_BACKEND)")
    parser.add_argument("--log-level", choices=["quiet", "error", "info", "debug"],
                        help="Log level (default: YT_SUMMARY_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application from command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url:
        parser.print_help()
        return 0

    backend = args.backend or config.BACKEND
    setup_logging(args.log_level or config.LOG_LEVEL, config.LOG_FILE)

    try:
        SubtitleRequest(url=args.url)
    except ValidationError:
        logging.error(f"Invalid URL: {args.url}")
        return 1

    missing = check_dependencies(config, backend)
    if missing:
        logging.error(f"Missing required dependencies: {' '.join(missing)}")
        logging.error("Please install them before running this command.")
        return 1

    def print_title(media: VideoMedia):
        if media.title:
            print(f"\nVideo Title: {media.title}\n", flush=True)

    try:
        summary_config = SummaryConfig.from_app_config(config, prompt=args.prompt)
        summary = summarize_youtube_video(
            args.url,
            lang=args.lang,
            sub_format=args.format,
            prompt=args.prompt,
            output_file=args.output,
            client=build_client(config, backend),
            summary_config=summary_config,
            on_media=print_title,
        )
    except (YTSummaryError, ValidationError) as e:
        logging.error(str(e))
        log_diagnostic_info({
            "url": args.url,
            "lang": args.lang,
            "format": args.format,
            "backend": backend,
            "error_type": type(e).__name__,
            "chunk_index": getattr(e, "chunk_index", None),
        })
        logging.error("Failed to generate summary")
        return 1

    print(summary.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
