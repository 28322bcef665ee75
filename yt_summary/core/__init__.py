"""
Core functionality for the subtitle summarizer.

This package contains modules for downloading subtitles, extracting their
text, splitting it into chunks, and summarizing it.
"""
