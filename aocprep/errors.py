"""Error types raised by the aocprep library."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIG = "config"
    DAY_NAME = "day_name"
    NOT_YET_AVAILABLE = "not_yet_available"
    FETCH = "fetch"
    IO = "io"


class AocPrepError(Exception):
    """Fatal failure of a single aocprep invocation.

    ``kind`` tells callers what went wrong without parsing the message.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
