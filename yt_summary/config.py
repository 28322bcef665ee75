"""
Configuration settings for the subtitle summarizer application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from yt_summary.core.prompts import DEFAULT_PROMPT, CHUNK_PROMPT, CONSOLIDATION_SUFFIX


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Subtitle Summarizer"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    SUMMARIES_DIR = Path(os.getenv("YT_SUMMARY_OUTPUT_DIR", str(DATA_DIR / "summaries")))

    # Subtitle acquisition
    DEFAULT_LANG = os.getenv("YT_SUMMARY_LANG", "en-orig")
    DEFAULT_FORMAT = os.getenv("YT_SUMMARY_FORMAT", "ttml")

    # Summarization
    DEFAULT_PROMPT = os.getenv("YT_SUMMARY_PROMPT", DEFAULT_PROMPT)
    CHUNK_PROMPT = CHUNK_PROMPT
    CONSOLIDATION_SUFFIX = CONSOLIDATION_SUFFIX
    # Kept as strings; SummaryConfig validates them when a run starts
    MAX_CHUNK_SIZE = os.getenv("YT_SUMMARY_MAX_CHUNK_SIZE", "15000")
    CHUNK_SIZE = os.getenv("YT_SUMMARY_CHUNK_SIZE", "10000")
    MAX_WORKERS = os.getenv("YT_SUMMARY_MAX_WORKERS", "1")

    # Completion backend: "aichat" shells out, "langchain" uses a chat model
    BACKEND = os.getenv("YT_SUMMARY_BACKEND", "aichat").lower()
    AICHAT_PATH = os.getenv("YT_SUMMARY_AICHAT_PATH", "aichat")
    AICHAT_MODEL = os.getenv("YT_SUMMARY_AICHAT_MODEL") or None
    COMPLETION_TIMEOUT = os.getenv("YT_SUMMARY_TIMEOUT") or None
    DEFAULT_SUMMARY_MODEL = os.getenv("YT_SUMMARY_MODEL", "llama-3.3-70b-versatile")
    MODEL_PROVIDER = os.getenv("YT_SUMMARY_MODEL_PROVIDER", "groq")
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Logging
    LOG_LEVEL = os.getenv("YT_SUMMARY_LOG_LEVEL", "info").lower()
    LOG_FILE = os.getenv("YT_SUMMARY_LOG_FILE") or None


def get_config():
    """Get the application configuration."""
    return Config


config = get_config()
