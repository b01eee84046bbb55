"""HTTP fetcher for puzzle pages and personal inputs."""

from __future__ import annotations

import logging

import httpx

from aocprep.config import AocConfig, settings
from aocprep.errors import AocPrepError, ErrorKind
from aocprep.scraper.models import PuzzlePage

logger = logging.getLogger(__name__)

# Statuses the site answers with when a day is not unlocked yet (or the
# session cannot see it).
_NOT_READY_STATUSES = frozenset({400, 401, 403, 404})


def puzzle_url(config: AocConfig, day_number: int, suffix: str = "") -> str:
    """``<site_root>/<year>/day/<day_number><suffix>``."""
    root = settings.site_root.rstrip("/")
    return f"{root}/{config.year}/day/{day_number}{suffix}"


def retrieve_aoc(config: AocConfig, day_number: int, suffix: str = "") -> PuzzlePage:
    """Fetch a puzzle resource with the session cookie attached.

    Raises:
        AocPrepError: ``ErrorKind.NOT_YET_AVAILABLE`` when the site refuses
            the resource (usually because it was asked for too soon),
            ``ErrorKind.FETCH`` for any other HTTP or transport failure.
    """
    url = puzzle_url(config, day_number, suffix)
    headers = {
        "Cookie": f"session={config.session}",
        "User-Agent": settings.user_agent,
    }
    logger.debug("GET %s", url)

    try:
        with httpx.Client(
            headers=headers,
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        if status in _NOT_READY_STATUSES:
            what = "Input" if suffix == "/input" else "Puzzle page"
            raise AocPrepError(
                ErrorKind.NOT_YET_AVAILABLE,
                f"{what} not available (too soon?): HTTP {status} from {url}",
            ) from exc
        raise AocPrepError(ErrorKind.FETCH, f"HTTP {status} from {url}") from exc
    except httpx.HTTPError as exc:
        raise AocPrepError(ErrorKind.FETCH, f"Request to {url} failed: {exc}") from exc

    return PuzzlePage(url=url, text=response.text, status_code=response.status_code)
