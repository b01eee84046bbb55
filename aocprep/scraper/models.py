"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PuzzlePage:
    """The raw HTTP response for a single puzzle page or input fetch."""

    url: str
    text: str
    status_code: int
