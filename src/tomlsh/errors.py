"""Error hierarchy for tomlsh."""

from __future__ import annotations

__all__ = ["TomlshError", "NoSuchKeyError", "InputError"]


class TomlshError(Exception):
    """Base error for all tomlsh failures reported to the user."""


class NoSuchKeyError(TomlshError):
    """Raised when a dotted path does not resolve.

    ``key`` is always the whole requested path, not the segment that missed.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"No such key: {key}")
        self.key = key


class InputError(TomlshError):
    """Raised when the document cannot be read from a file or stdin."""

    def __init__(self, path: str | None, cause: OSError) -> None:
        super().__init__(f"IOError: {cause}")
        self.path = path
