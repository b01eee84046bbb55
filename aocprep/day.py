"""Run identity: which day we are working on and where it lives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from aocprep.config import AocConfig, load_aoc_config, settings
from aocprep.errors import AocPrepError, ErrorKind

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class RunContext:
    """A day name (e.g. ``day07``) plus the project folder that holds it."""

    day_name: str
    base_folder: Path

    @classmethod
    def from_day_folder(cls, day_folder: Path) -> RunContext:
        """Build a context for running *inside* an existing day folder."""
        day_folder = day_folder.resolve()
        if day_folder.parent == day_folder or not day_folder.name:
            raise AocPrepError(
                ErrorKind.DAY_NAME, f"No parent folder for {str(day_folder)!r}"
            )
        return cls(day_name=day_folder.name, base_folder=day_folder.parent)

    @property
    def day_number(self) -> int:
        """Strip :attr:`Settings.day_prefix` and parse the rest as an integer.

        ``day7`` and ``day07`` both yield ``7``.
        """
        prefix = settings.day_prefix
        suffix = self.day_name[len(prefix):]
        if not self.day_name.startswith(prefix) or not _DIGITS.fullmatch(suffix):
            raise AocPrepError(
                ErrorKind.DAY_NAME,
                f"Unable to parse day number from {self.day_name!r} "
                f"(expected {prefix!r} followed by digits, e.g. {prefix}07)",
            )
        return int(suffix)

    @property
    def day_folder(self) -> Path:
        return self.base_folder / self.day_name

    @property
    def config_file(self) -> Path:
        return self.base_folder / settings.config_filename

    @property
    def skeleton_folder(self) -> Path:
        return self.base_folder / settings.skeleton_dirname

    def aoc_config(self) -> AocConfig:
        return load_aoc_config(self.config_file)
