"""Conversion of fixed-column fields of text lines."""

from __future__ import annotations

import re
from typing import Callable

_WHITESPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

UNSIGNED = "unsigned"
"""Pass as ``kind`` to convert to a non-negative integer."""


class BadConversion(ValueError):
    """Raised when a substring cannot be converted or its indexes are invalid."""


def _check_range(text: str, i: int, j: int) -> None:
    if i < 1 or i > j + 1 or j > len(text):
        raise BadConversion(f"invalid column range {i}..{j} for a line of {len(text)}")


def _parse_int(field: str) -> int:
    if not _INT_RE.fullmatch(field):
        raise BadConversion(f"not an integer: {field!r}")
    return int(field)


def _parse_unsigned(field: str) -> int:
    value = _parse_int(field)
    if value < 0:
        raise BadConversion(f"negative value: {field!r}")
    return value


def _parse_float(field: str) -> float:
    if not _FLOAT_RE.fullmatch(field):
        raise BadConversion(f"not a number: {field!r}")
    return float(field)


_PARSERS: dict[object, Callable[[str], object]] = {
    int: _parse_int,
    UNSIGNED: _parse_unsigned,
    float: _parse_float,
    str: lambda field: field,
}


def convert_substring(text: str, i: int, j: int, kind=str):
    """Convert columns ``i..j`` (1-based, inclusive) of ``text``.

    Leading whitespace is skipped. ``kind`` is ``int``, ``float``, ``str``
    or ``UNSIGNED``.
    """
    _check_range(text, i, j)
    try:
        parser = _PARSERS[kind]
    except (KeyError, TypeError):
        raise ValueError(f"unsupported conversion kind: {kind!r}") from None
    field = text[i - 1 : j].lstrip(_WHITESPACE)
    return parser(field)


def substring_is_blank(text: str, i: int, j: int) -> bool:
    """True if columns ``i..j`` (1-based, inclusive) hold only whitespace."""
    _check_range(text, i, j)
    return all(ch in _WHITESPACE for ch in text[i - 1 : j])