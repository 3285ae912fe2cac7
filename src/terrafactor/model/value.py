"""Typed view over a decoded JSON value.

A decoded document is a tree of plain Python objects as produced by
:func:`json.loads`. The renderer dispatches on :class:`ValueKind` rather than
inspecting types at every call site.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from typing import Any

# Text rendered in place of a JSON ``null``.
UNKNOWN_VALUE: str = "(Unknown Value)"

# Floats at or above this magnitude are printed in exponent form.
_EXPONENT_THRESHOLD: float = 1e21


class ValueKind(enum.Enum):
    """The four shapes a decoded value can take."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"
    NULL = "null"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    Strings and bytes are scalars even though they are sequences.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ValueKind.ARRAY
    return ValueKind.SCALAR


def unwrap(value: Any) -> tuple[str, Mapping[str, Any]] | None:
    """Return ``(key, inner)`` if *value* is a single-key wrapper object.

    A wrapper is an object with exactly one key whose value is itself an
    object, e.g. ``{"subscriber": {"id": 5}}``. Anything else returns ``None``.
    """
    if classify(value) is not ValueKind.OBJECT or len(value) != 1:
        return None
    ((key, inner),) = value.items()
    if classify(inner) is not ValueKind.OBJECT:
        return None
    return key, inner


def format_scalar(value: Any) -> str:
    """Return the display text for a leaf value.

    Rules:

    - ``None`` becomes :data:`UNKNOWN_VALUE`.
    - Booleans render as ``true`` / ``false``.
    - Integral floats below ``1e21`` drop the fractional part (``2.0`` -> ``2``).
    - Other floats use their shortest round-trip form.
    - Strings are returned verbatim, with no quoting or escaping.
    """
    if value is None:
        return UNKNOWN_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    return str(value)
