"""
Subtitle acquisition with yt-dlp and text extraction with lxml.
"""

import glob
import os
from typing import List

from lxml import etree
from pytubefix import YouTube
from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError

from yt_summary.models.schemas import SubtitleRequest, VideoMedia
from yt_summary.utils.error_handling import (
    SubtitleDownloadError,
    SubtitleExtractionError,
    SubtitleNotFoundError,
)
from yt_summary.utils.logger import logging

TEXT_XPATH = "//*[local-name()='p']/text()"


class SubtitleDownloader:
    """Class to handle looking up and downloading auto-generated subtitles."""

    def __init__(self, request: SubtitleRequest):
        """
        Initialize the downloader with a request.

        Args:
            request: URL, language, format and target directory
        """
        self.request = request
        self.output_directory = request.output_directory or os.getcwd()

    def _ydl_options(self, **extra) -> dict:
        options = {"quiet": True, "no_warnings": True, "skip_download": True}
        options.update(extra)
        return options

    def get_media_info(self) -> VideoMedia:
        """Extract metadata from the video page."""
        yt = YouTube(self.request.url)
        return VideoMedia(
            video_id=yt.video_id,
            title=yt.title,
            author=yt.author,
            url=self.request.url,
        )

    def list_subtitles(self) -> List[str]:
        """
        List the languages with subtitles, manual or automatic.

        Returns:
            Sorted language codes
        """
        try:
            with YoutubeDL(self._ydl_options()) as ydl:
                info = ydl.extract_info(self.request.url, download=False)
        except DownloadError as e:
            raise SubtitleDownloadError(f"Failed to check subtitles: {str(e)}") from e

        languages = set((info or {}).get("subtitles") or {})
        languages.update((info or {}).get("automatic_captions") or {})
        return sorted(languages)

    def check_subtitles(self) -> None:
        """
        Ensure subtitles exist for the requested language.

        Raises:
            SubtitleNotFoundError: no subtitles, or none for the language
        """
        logging.info(f"Checking subtitles for {self.request.url}")
        languages = self.list_subtitles()

        if not languages:
            raise SubtitleNotFoundError(f"No subtitles found for {self.request.url}")

        if self.request.lang not in languages:
            logging.debug(f"Available subtitles: {', '.join(languages)}")
            raise SubtitleNotFoundError(f"No subtitles for '{self.request.lang}' found")

        logging.info(f"Subtitles for '{self.request.lang}' found")

    def download_subtitles(self) -> str:
        """
        Download the auto-generated subtitles.

        Returns:
            Path to the downloaded subtitle file
        """
        lang, sub_format = self.request.lang, self.request.sub_format
        logging.info(f"Downloading subtitles ({lang}) in {sub_format} format")

        os.makedirs(self.output_directory, exist_ok=True)
        options = self._ydl_options(
            writeautomaticsub=True,
            subtitleslangs=[lang],
            subtitlesformat=sub_format,
            outtmpl=os.path.join(self.output_directory, "%(id)s.%(ext)s"),
        )

        try:
            with YoutubeDL(options) as ydl:
                retcode = ydl.download([self.request.url])
        except DownloadError as e:
            raise SubtitleDownloadError(f"Failed to download subtitles: {str(e)}") from e

        if retcode:
            raise SubtitleDownloadError(f"Failed to download subtitles (exit code {retcode})")

        subtitle_files = sorted(glob.glob(os.path.join(self.output_directory, f"*.{sub_format}")))
        if not subtitle_files:
            raise SubtitleDownloadError(f"No subtitle file found with format: {sub_format}")

        logging.debug(f"Processing subtitle file: {subtitle_files[0]}")
        return subtitle_files[0]

    def download(self) -> VideoMedia:
        """
        Check availability and download the subtitles.

        Returns:
            VideoMedia with subtitle_path set
        """
        logging.debug("Fetching video title")
        try:
            media = self.get_media_info()
        except Exception as e:
            # The title is informational only
            logging.warning(f"Failed to get video title: {str(e)}")
            media = VideoMedia(url=self.request.url)

        self.check_subtitles()
        media.subtitle_path = self.download_subtitles()
        return media


def extract_subtitle_text(subtitle_path: str) -> str:
    """
    Extract the plain text of every <p> element in a subtitle file.

    Text nodes are joined with a space and line breaks are removed.

    Args:
        subtitle_path: Path to a TTML (or other XML) subtitle file

    Returns:
        The subtitle text
    """
    logging.info("Extracting text from subtitles")

    try:
        tree = etree.parse(subtitle_path)
    except (OSError, etree.XMLSyntaxError) as e:
        raise SubtitleExtractionError(f"Failed to extract text from subtitle file: {str(e)}") from e

    fragments = [str(node).replace("\n", " ").strip() for node in tree.xpath(TEXT_XPATH)]
    return " ".join(fragment for fragment in fragments if fragment)
