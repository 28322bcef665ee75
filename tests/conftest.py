"""
Configuration for pytest tests.
"""

import pytest
from unittest.mock import MagicMock

from yt_summary.core.clients import SummarizationClient
from yt_summary.models.schemas import SummaryConfig

TTML_DOCUMENT = """<?xml version="1.0" encoding="utf-8" ?>
<tt xml:lang="en" xmlns="http://www.w3.org/ns/ttml" xmlns:tts="http://www.w3.org/ns/ttml#styling">
<body>
<div>
<p begin="00:00:00.160" end="00:00:02.310" style="s2">welcome back to the
channel</p>
<p begin="00:00:02.310" end="00:00:04.950" style="s2">today we talk about testing</p>
<p begin="00:00:04.950" end="00:00:06.000" style="s2"></p>
<p begin="00:00:06.000" end="00:00:08.120" style="s2">thanks for watching</p>
</div>
</body>
</tt>
"""


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=V3TUEeB0kW0"


@pytest.fixture
def summary_config():
    """Run settings matching the production defaults."""
    return SummaryConfig(
        prompt="Summarize the subtitles.",
        chunk_prompt="Summarize this part.",
        consolidation_suffix="Merge the partial summaries.",
        max_chunk_size=15000,
        chunk_size=10000,
    )


@pytest.fixture
def mock_client():
    """A completion client that echoes the size of what it was given."""
    client = MagicMock(spec=SummarizationClient)
    client.summarize.side_effect = lambda text, prompt: f"summary of {len(text)} chars"
    return client


@pytest.fixture
def ttml_file(tmp_path):
    """Write a small TTML subtitle file and return its path."""
    path = tmp_path / "V3TUEeB0kW0.en-orig.ttml"
    path.write_text(TTML_DOCUMENT, encoding="utf-8")
    return path
