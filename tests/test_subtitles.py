"""
Tests for the subtitle downloader and text extraction.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

from yt_dlp.utils import DownloadError

from yt_summary.core.subtitles import SubtitleDownloader, extract_subtitle_text
from yt_summary.models.schemas import SubtitleRequest, VideoMedia
from yt_summary.utils.error_handling import (
    SubtitleDownloadError,
    SubtitleExtractionError,
    SubtitleNotFoundError,
)


@pytest.fixture
def mock_youtube():
    """Fixture to mock the pytubefix YouTube class."""
    with patch('yt_summary.core.subtitles.YouTube') as mock_yt:
        mock_yt_instance = mock_yt.return_value
        mock_yt_instance.title = "Test Video"
        mock_yt_instance.author = "Test Author"
        mock_yt_instance.video_id = "V3TUEeB0kW0"
        yield mock_yt


@pytest.fixture
def mock_ydl():
    """Fixture to mock yt-dlp's YoutubeDL context manager."""
    with patch('yt_summary.core.subtitles.YoutubeDL') as mock_ydl_class:
        ydl = mock_ydl_class.return_value.__enter__.return_value
        ydl.extract_info.return_value = {
            "id": "V3TUEeB0kW0",
            "subtitles": {"ja": []},
            "automatic_captions": {"en": [], "en-orig": [], "fr": []},
        }
        ydl.download.return_value = 0
        yield mock_ydl_class


@pytest.fixture
def request_config(test_video_url, tmp_path):
    return SubtitleRequest(url=test_video_url, lang="en-orig", sub_format="ttml",
                           output_directory=str(tmp_path))


def test_request_rejects_invalid_url():
    """Only http(s) URLs are accepted."""
    with pytest.raises(ValueError):
        SubtitleRequest(url="ftp://example.com/video")


def test_get_media_info(mock_youtube, request_config):
    """Metadata comes from pytubefix."""
    media = SubtitleDownloader(request_config).get_media_info()

    assert isinstance(media, VideoMedia)
    assert media.title == "Test Video"
    assert media.author == "Test Author"
    assert media.video_id == "V3TUEeB0kW0"


def test_list_subtitles_merges_manual_and_automatic(mock_ydl, request_config):
    """Manual and automatic tracks are listed together."""
    languages = SubtitleDownloader(request_config).list_subtitles()

    assert languages == ["en", "en-orig", "fr", "ja"]
    ydl = mock_ydl.return_value.__enter__.return_value
    ydl.extract_info.assert_called_once_with(request_config.url, download=False)


def test_check_subtitles_missing_language(mock_ydl, test_video_url, tmp_path):
    """A language that is not listed raises SubtitleNotFoundError."""
    request = SubtitleRequest(url=test_video_url, lang="de", output_directory=str(tmp_path))

    with pytest.raises(SubtitleNotFoundError):
        SubtitleDownloader(request).check_subtitles()


def test_check_subtitles_none_available(mock_ydl, request_config):
    """A video without any subtitles raises SubtitleNotFoundError."""
    ydl = mock_ydl.return_value.__enter__.return_value
    ydl.extract_info.return_value = {"id": "V3TUEeB0kW0"}

    with pytest.raises(SubtitleNotFoundError):
        SubtitleDownloader(request_config).check_subtitles()


def test_check_subtitles_download_error(mock_ydl, request_config):
    """yt-dlp errors while listing become SubtitleDownloadError."""
    ydl = mock_ydl.return_value.__enter__.return_value
    ydl.extract_info.side_effect = DownloadError("Video unavailable")

    with pytest.raises(SubtitleDownloadError):
        SubtitleDownloader(request_config).check_subtitles()


def test_download_subtitles(mock_ydl, request_config, tmp_path):
    """Auto subtitles are requested and the produced file is returned."""
    ydl = mock_ydl.return_value.__enter__.return_value

    def fake_download(urls):
        (tmp_path / "V3TUEeB0kW0.en-orig.ttml").write_text("<tt/>", encoding="utf-8")
        return 0

    ydl.download.side_effect = fake_download

    path = SubtitleDownloader(request_config).download_subtitles()

    assert path == os.path.join(str(tmp_path), "V3TUEeB0kW0.en-orig.ttml")
    options = mock_ydl.call_args.args[0]
    assert options["writeautomaticsub"] is True
    assert options["skip_download"] is True
    assert options["subtitleslangs"] == ["en-orig"]
    assert options["subtitlesformat"] == "ttml"
    assert options["outtmpl"].startswith(str(tmp_path))


def test_download_subtitles_no_file(mock_ydl, request_config):
    """A download that writes nothing raises SubtitleDownloadError."""
    with pytest.raises(SubtitleDownloadError):
        SubtitleDownloader(request_config).download_subtitles()


def test_download_subtitles_nonzero_retcode(mock_ydl, request_config):
    """A non-zero yt-dlp return code raises SubtitleDownloadError."""
    mock_ydl.return_value.__enter__.return_value.download.return_value = 1

    with pytest.raises(SubtitleDownloadError):
        SubtitleDownloader(request_config).download_subtitles()


def test_download_survives_title_failure(mock_youtube, mock_ydl, request_config):
    """A failed title lookup does not stop the download."""
    mock_youtube.side_effect = RuntimeError("regex match failed")
    downloader = SubtitleDownloader(request_config)

    with patch.object(downloader, "download_subtitles", return_value="/tmp/sub.ttml"):
        media = downloader.download()

    assert media.title == ""
    assert media.subtitle_path == "/tmp/sub.ttml"


def test_extract_subtitle_text(ttml_file):
    """Text of every <p> element is joined without line breaks."""
    text = extract_subtitle_text(str(ttml_file))

    assert text == ("welcome back to the channel today we talk about testing "
                    "thanks for watching")


def test_extract_subtitle_text_without_namespace(tmp_path):
    """Elements are matched by local name, with or without a namespace."""
    path = tmp_path / "plain.xml"
    path.write_text("<tt><body><p>one</p><p>two</p></body></tt>", encoding="utf-8")

    assert extract_subtitle_text(str(path)) == "one two"


def test_extract_subtitle_text_malformed(tmp_path):
    """Broken XML raises SubtitleExtractionError."""
    path = tmp_path / "broken.ttml"
    path.write_text("<tt><p>unclosed", encoding="utf-8")

    with pytest.raises(SubtitleExtractionError):
        extract_subtitle_text(str(path))


def test_extract_subtitle_text_missing_file(tmp_path):
    """A missing file raises SubtitleExtractionError."""
    with pytest.raises(SubtitleExtractionError):
        extract_subtitle_text(str(tmp_path / "missing.ttml"))
