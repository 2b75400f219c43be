"""Reader layer: converts parsed TOML 1.0 data into tomlsh values."""

from __future__ import annotations

import logging
import sys
from datetime import date, datetime, time

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import InputError
from .values import Value, VArray, VBool, VDatetime, VFloat, VInteger, VString, VTable

_logger = logging.getLogger(__name__)

TOMLDecodeError = tomllib.TOMLDecodeError


# ---------------------------------------------------------------------------
# Input acquisition
# ---------------------------------------------------------------------------

def read_input(path: str | None = None) -> str:
    """Return the document text from *path*, or from stdin when *path* is None."""
    try:
        if path is None:
            _logger.debug("reading document from stdin")
            return sys.stdin.read()
        _logger.debug("reading document from %s", path)
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except OSError as exc:
        raise InputError(path, exc) from exc


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def to_value(obj: object) -> Value:
    """Convert a plain object produced by the TOML parser to a Value."""
    # bool is a subclass of int
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInteger(obj)
    if isinstance(obj, float):
        return VFloat(obj)
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, (datetime, date, time)):
        return VDatetime(obj)
    if isinstance(obj, (list, tuple)):
        return VArray([to_value(item) for item in obj])
    if isinstance(obj, dict):
        return VTable({str(k): to_value(v) for k, v in obj.items()})
    raise TypeError(f"cannot convert {type(obj).__name__} to a TOML value")


def parse(text: str) -> VTable:
    """Parse TOML *text* into a root table.

    Malformed input raises ``tomllib.TOMLDecodeError`` unchanged.
    """
    return VTable({k: to_value(v) for k, v in tomllib.loads(text).items()})
