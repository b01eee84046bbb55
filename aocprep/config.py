"""Centralised settings for aocprep.

Two layers of configuration live here:

* :data:`settings` — tool-wide knobs (site root, user agent, file names).
  Values can be overridden via environment variables or a ``.env`` file in
  the folder the tool runs from or one of its parents (loaded when this
  module is imported).
* :class:`AocConfig` — the per-project ``aoc.toml`` record holding the
  puzzle year and the session cookie.  Load it once with
  :func:`load_aoc_config` and pass it to whatever needs it.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError

from aocprep.errors import AocPrepError, ErrorKind


def env_file() -> str:
    """Path of the ``.env`` nearest the working directory, or ``""``."""
    return find_dotenv(usecwd=True)


# Load .env from the working directory or the nearest parent holding one.
load_dotenv(env_file(), override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Remote site
    # ------------------------------------------------------------------
    site_root: str = field(
        default_factory=lambda: os.environ.get("AOC_SITE_ROOT", "https://adventofcode.com")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "AOC_USER_AGENT",
            "aocprep/0.1 (+https://github.com/Japanuspus/aocprep)",
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("AOC_REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Project layout
    # ------------------------------------------------------------------
    config_filename: str = "aoc.toml"
    skeleton_dirname: str = "skeleton"
    manifest_filename: str = "Cargo.toml"
    day_prefix: str = field(
        default_factory=lambda: os.environ.get("AOC_DAY_PREFIX", "day")
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("AOC_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from aocprep.config import settings
settings = Settings()


class AocConfig(BaseModel):
    """Contents of a project's ``aoc.toml``."""

    year: str
    session: str

    def __repr__(self) -> str:
        # Keep the session cookie out of tracebacks and logs.
        return f"AocConfig(year={self.year!r}, session='***')"

    __str__ = __repr__


def load_aoc_config(config_file: Path) -> AocConfig:
    """Read and validate *config_file*.

    Raises:
        AocPrepError: ``ErrorKind.CONFIG`` when the file is missing,
            unreadable, not valid TOML, or lacks ``year``/``session``.
    """
    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AocPrepError(
            ErrorKind.CONFIG, f"Error reading config file {str(config_file)!r}: {exc}"
        ) from exc

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise AocPrepError(
            ErrorKind.CONFIG, f"Parsing config file {str(config_file)!r}: {exc}"
        ) from exc

    try:
        return AocConfig.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise AocPrepError(
            ErrorKind.CONFIG,
            f"Invalid config file {str(config_file)!r}: bad or missing {fields}",
        ) from exc
