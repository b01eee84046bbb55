"""Scraper package — puzzle fetch & example extraction."""

from aocprep.scraper.extractor import parse_tests
from aocprep.scraper.fetcher import puzzle_url, retrieve_aoc
from aocprep.scraper.models import PuzzlePage

__all__ = ["retrieve_aoc", "puzzle_url", "parse_tests", "PuzzlePage"]
