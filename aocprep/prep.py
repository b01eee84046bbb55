"""Fetch a day's personal input and page examples into its folder.

Both operations are safe to re-run: files already on disk are left alone
and no request is made for them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from aocprep.config import AocConfig
from aocprep.day import RunContext
from aocprep.errors import AocPrepError, ErrorKind
from aocprep.scraper.extractor import parse_tests
from aocprep.scraper.fetcher import retrieve_aoc

logger = logging.getLogger(__name__)

INPUT_FILENAME = "input.txt"


def fixture_path(day_folder: Path, index: int) -> Path:
    return day_folder / f"test{index:02d}.txt"


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise AocPrepError(ErrorKind.IO, f"Unable to write {str(path)!r}: {exc}") from exc


def get_inputs(run: RunContext, config: AocConfig) -> bool:
    """Download ``input.txt`` unless it is already present.

    Returns ``True`` if the file was written.
    """
    input_file = run.day_folder / INPUT_FILENAME
    if input_file.exists():
        logger.info("Input file %s exists, not retrieving", input_file)
        return False

    page = retrieve_aoc(config, run.day_number, "/input")
    logger.info("Writing input file %s", input_file)
    _write_text(input_file, page.text)
    return True


def get_tests(run: RunContext, config: AocConfig) -> List[Path]:
    """Extract the page's examples into ``testNN.txt`` files.

    Each index is checked on its own, so an interrupted run can be repeated.
    Returns the paths that were newly written.
    """
    page = retrieve_aoc(config, run.day_number)
    tests = parse_tests(page.text)
    if not tests:
        logger.info("No examples found on %s", page.url)

    written: List[Path] = []
    for i, text in enumerate(tests):
        dst = fixture_path(run.day_folder, i)
        if dst.exists():
            logger.info("Test file %s exists", dst)
            continue
        logger.info("Writing test file %s", dst)
        _write_text(dst, text)
        written.append(dst)
    return written
