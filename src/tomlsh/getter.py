"""Getter resolution for tomlsh."""

from __future__ import annotations

from .errors import NoSuchKeyError
from .values import Value, VTable


def split_path(pattern: str) -> list[str]:
    """Split a dotted pattern into key segments.

    Segments are matched literally; ``""`` yields ``[""]``.
    """
    return pattern.split(".")


def apply_getter(value: Value, segment: str) -> Value | None:
    """Resolve a single key on a value.

    Only tables have keys; anything else resolves to None.
    """
    if isinstance(value, VTable):
        return value.entries.get(segment)
    return None


def get_path(root: Value, path: list[str]) -> Value:
    """Follow *path* from *root* one table lookup at a time.

    Raises NoSuchKeyError naming the full dotted path on the first miss.
    """
    value = root
    for segment in path:
        found = apply_getter(value, segment)
        if found is None:
            raise NoSuchKeyError(".".join(path))
        value = found
    return value
