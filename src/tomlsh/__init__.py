"""tomlsh: extract TOML values in shell-ready form."""

__version__ = "0.1.0"

from .errors import InputError, NoSuchKeyError, TomlshError
from .getter import apply_getter, get_path, split_path
from .reader import parse, read_input, to_value
from .shell import decode_literal, fmt_atom, fmt_bash, quote_shell
from .values import (
    Value,
    VArray,
    VBool,
    VDatetime,
    VFloat,
    VInteger,
    VString,
    VTable,
    is_atomic,
)

__all__ = [
    "parse",
    "read_input",
    "to_value",
    "split_path",
    "apply_getter",
    "get_path",
    "decode_literal",
    "quote_shell",
    "fmt_atom",
    "fmt_bash",
    "is_atomic",
    "Value",
    "VArray",
    "VBool",
    "VDatetime",
    "VFloat",
    "VInteger",
    "VString",
    "VTable",
    "TomlshError",
    "NoSuchKeyError",
    "InputError",
]
