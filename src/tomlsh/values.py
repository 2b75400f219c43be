"""Value types for tomlsh."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Union


@dataclass(frozen=True)
class VString:
    value: str


@dataclass(frozen=True)
class VBool:
    value: bool


@dataclass(frozen=True)
class VInteger:
    value: int


@dataclass(frozen=True)
class VFloat:
    value: float


@dataclass(frozen=True)
class VDatetime:
    value: datetime | date | time  # offset/local datetime, local date, local time


@dataclass(frozen=True)
class VArray:
    items: list["Value"] = field(default_factory=list)


@dataclass(frozen=True)
class VTable:
    entries: dict[str, "Value"] = field(default_factory=dict)


Value = Union[VString, VBool, VInteger, VFloat, VDatetime, VArray, VTable]


def is_atomic(value: Value) -> bool:
    """True for scalars; arrays and tables are composites."""
    return isinstance(value, (VString, VBool, VInteger, VFloat, VDatetime))
