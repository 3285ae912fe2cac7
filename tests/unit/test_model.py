"""Unit tests for terrafactor.model.value and terrafactor.model.operation."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from terrafactor.errors import InvalidOperationError, TerrafactorError
from terrafactor.model.operation import (
    DEFAULT_PALETTE,
    MARKER_WIDTH,
    PLAIN_PALETTE,
    Operation,
)
from terrafactor.model.value import (
    UNKNOWN_VALUE,
    ValueKind,
    classify,
    format_scalar,
    unwrap,
)

# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ({}, ValueKind.OBJECT),
        (OrderedDict(a=1), ValueKind.OBJECT),
        ([], ValueKind.ARRAY),
        ((1, 2), ValueKind.ARRAY),
        ("text", ValueKind.SCALAR),
        (b"raw", ValueKind.SCALAR),
        (0, ValueKind.SCALAR),
        (0.5, ValueKind.SCALAR),
        (True, ValueKind.SCALAR),
        (None, ValueKind.NULL),
    ],
)
def test_classify(value: Any, kind: ValueKind) -> None:
    assert classify(value) is kind


# ---------------------------------------------------------------------------
# unwrap
# ---------------------------------------------------------------------------

def test_unwrap_single_key_object_value() -> None:
    inner = {"id": 5}
    assert unwrap({"subscriber": inner}) == ("subscriber", inner)


def test_unwrap_empty_inner_object() -> None:
    assert unwrap({"x": {}}) == ("x", {})


@pytest.mark.parametrize(
    "value",
    [
        {},
        {"a": {"x": 1}, "b": {"y": 2}},
        {"a": 1},
        {"a": None},
        {"a": [{"x": 1}]},
        [{"a": {"x": 1}}],
        "a",
    ],
)
def test_unwrap_rejects_non_wrappers(value: Any) -> None:
    assert unwrap(value) is None


# ---------------------------------------------------------------------------
# format_scalar
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("value", "text"),
    [
        (None, UNKNOWN_VALUE),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-17, "-17"),
        (12345678901234567890, "12345678901234567890"),
        (3.0, "3"),
        (-0.25, "-0.25"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1e-7, "1e-07"),
        ("", ""),
        ("multi word", "multi word"),
    ],
)
def test_format_scalar(value: Any, text: str) -> None:
    assert format_scalar(value) == text


def test_unknown_value_literal() -> None:
    assert UNKNOWN_VALUE == "(Unknown Value)"


# ---------------------------------------------------------------------------
# Operation
# ---------------------------------------------------------------------------

def test_operation_from_tag() -> None:
    assert Operation.from_tag("create") is Operation.CREATE
    assert Operation.from_tag("destroy") is Operation.DESTROY


@pytest.mark.parametrize("tag", ["CREATE", "Destroy", "update", "", "create "])
def test_operation_from_tag_rejects(tag: str) -> None:
    with pytest.raises(InvalidOperationError) as exc_info:
        Operation.from_tag(tag)
    assert exc_info.value.operation == tag
    assert isinstance(exc_info.value, TerrafactorError)
    assert "Supported operations are 'create' or 'destroy'" in str(exc_info.value)


def test_markers_have_fixed_visible_width() -> None:
    for op in Operation:
        assert len(op.marker) == MARKER_WIDTH
        assert len(op.prefix(PLAIN_PALETTE)) == MARKER_WIDTH


def test_default_prefix_colours() -> None:
    assert Operation.CREATE.prefix() == "\033[32m+  \033[0m"
    assert Operation.DESTROY.prefix(DEFAULT_PALETTE) == "\033[31m-  \033[0m"


def test_plain_prefix_has_no_escape_codes() -> None:
    assert Operation.CREATE.prefix(PLAIN_PALETTE) == "+  "
    assert Operation.DESTROY.prefix(PLAIN_PALETTE) == "-  "
