"""Error kinds raised while loading and checking a map."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Every way a map can be rejected, with its numeric code."""

    MAP_ERROR = -1
    MAP_FAILED_OPEN = -2
    FILE_EXTENSION_ERROR = -3
    WRONG_PEC = -4
    SQUARE_MAP = -5
    CLOSED_MAP = -6
    PLAYABLE_MAP = -7
    WRONG_CHARACTER = -8


_MESSAGES = {
    ErrorKind.MAP_ERROR: "Map error",
    ErrorKind.MAP_FAILED_OPEN: "Please, insert a valid map.",
    ErrorKind.FILE_EXTENSION_ERROR: "The map must have a .ber extension!",
    ErrorKind.WRONG_PEC: "The map must have 1 P, 1 E and at least 1 C!",
    ErrorKind.SQUARE_MAP: "The map must be a rectangle!",
    ErrorKind.CLOSED_MAP: "The map must be closed by walls (1)!",
    ErrorKind.PLAYABLE_MAP: "The map must be playable!",
    ErrorKind.WRONG_CHARACTER: (
        "The map must only have the following characters: "
        "'1', '0', 'E', 'P', 'C'!"
    ),
}


def error_message(kind: ErrorKind | int) -> str:
    """Return the user-facing message for an error kind."""
    return _MESSAGES[ErrorKind(kind)]


class MapError(Exception):
    """Raised when a map cannot be read or does not pass validation."""

    def __init__(self, kind: ErrorKind | int) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(error_message(self.kind))