"""Terraform-plan style renderer for decoded JSON values.

Objects become ``key { ... }`` blocks, arrays become ``key [ ... ]`` blocks,
and every leaf line carries a coloured ``+`` (create) or ``-`` (destroy)
marker::

    a {
     +  x = 1
    }
    +  b = 2

Object keys are always emitted in ascending order so the output for a given
value is byte-identical between runs.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from terrafactor.errors import WriteFailureError
from terrafactor.model.operation import DEFAULT_PALETTE, MARKER_WIDTH, Operation, Palette
from terrafactor.model.value import ValueKind, classify, format_scalar, unwrap

logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT: str = "    "


class TextSink(Protocol):
    """Anything with a text ``write()`` method (files, ``sys.stdout``, buffers)."""

    def write(self, text: str, /) -> Any: ...


class Renderer:
    """Writes the plan rendering of a value to a text sink.

    The operation tag is resolved once at construction time, so an invalid
    tag is rejected before anything is written.

    Args:
        operation_tag: ``"create"`` or ``"destroy"`` (exact match).
        indent_unit: String whose *length* sets the spaces per nesting level.
        sink: Destination for the rendered lines.
        palette: Colour codes wrapped around the marker.

    Raises:
        InvalidOperationError: If *operation_tag* is not supported.
    """

    def __init__(
        self,
        operation_tag: str,
        indent_unit: str = DEFAULT_INDENT_UNIT,
        sink: TextSink | None = None,
        palette: Palette = DEFAULT_PALETTE,
    ) -> None:
        self.operation: Operation = Operation.from_tag(operation_tag)
        self.indent_width: int = len(indent_unit)
        self.prefix: str = self.operation.prefix(palette)
        self._sink: TextSink = sink if sink is not None else sys.stdout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, value: Any) -> None:
        """Render *value* starting at depth 0.

        Raises:
            WriteFailureError: If the sink rejects a write. Traversal stops at
                the first failure.
        """
        kind = classify(value)
        logger.debug("Rendering %s value (operation=%s)", kind.value, self.operation.value)
        if kind is ValueKind.OBJECT:
            self._render_object(value, 0)
        elif kind is ValueKind.ARRAY:
            self._render_array(value, 0)
        else:
            self._emit(self._indent(0, prefixed=True) + self.prefix + format_scalar(value))

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _render_object(self, obj: Mapping[str, Any], depth: int) -> None:
        indent = self._indent(depth)
        for key in sorted(obj):
            value = obj[key]
            kind = classify(value)
            if kind is ValueKind.OBJECT:
                self._emit(f"{indent}{key} {{")
                self._render_object(value, depth + 1)
                self._emit(f"{indent}}}")
            elif kind is ValueKind.ARRAY:
                self._emit(f"{indent}{key} [")
                self._render_array(value, depth + 1)
                self._emit(f"{indent}]")
            else:
                leaf_indent = self._indent(depth, prefixed=True)
                self._emit(f"{leaf_indent}{self.prefix}{key} = {format_scalar(value)}")

    def _render_array(self, items: Sequence[Any], depth: int) -> None:
        indent = self._indent(depth)
        for item in items:
            kind = classify(item)
            if kind is ValueKind.OBJECT:
                wrapped = unwrap(item)
                if wrapped is not None:
                    # {"name": {...}} collapses to a named block.
                    name, inner = wrapped
                    self._emit(f"{indent}{name} {{")
                    self._render_object(inner, depth + 1)
                else:
                    self._emit(f"{indent}{{")
                    self._render_object(item, depth + 1)
                self._emit(f"{indent}}}")
            elif kind is ValueKind.ARRAY:
                self._emit(f"{indent}[")
                self._render_array(item, depth + 1)
                self._emit(f"{indent}]")
            else:
                self._emit(f"{indent}{self.prefix}{format_scalar(item)}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _indent(self, depth: int, prefixed: bool = False) -> str:
        width = depth * self.indent_width
        if prefixed:
            width = max(0, width - MARKER_WIDTH)
        return " " * width

    def _emit(self, line: str) -> None:
        try:
            self._sink.write(line + "\n")
        except (OSError, ValueError) as exc:
            raise WriteFailureError(exc) from exc


def render(
    value: Any,
    operation_tag: str,
    indent_unit: str = DEFAULT_INDENT_UNIT,
    sink: TextSink | None = None,
    *,
    palette: Palette = DEFAULT_PALETTE,
) -> None:
    """Render *value* as a Terraform-plan style diff.

    Args:
        value: Decoded JSON value (dict, list, scalar or ``None``).
        operation_tag: ``"create"`` (green ``+``) or ``"destroy"`` (red ``-``).
        indent_unit: String repeated per nesting level; only its length is used.
        sink: Text stream to write to (default ``sys.stdout``).
        palette: Colour codes for the marker.

    Raises:
        InvalidOperationError: If *operation_tag* is not supported. Nothing is
            written in that case.
        WriteFailureError: If *sink* rejects a write.
    """
    Renderer(operation_tag, indent_unit, sink, palette).render(value)


def render_to_string(
    value: Any,
    operation_tag: str,
    indent_unit: str = DEFAULT_INDENT_UNIT,
    *,
    palette: Palette = DEFAULT_PALETTE,
) -> str:
    """Return the rendering of *value* as a string."""
    buf = io.StringIO()
    render(value, operation_tag, indent_unit, buf, palette=palette)
    return buf.getvalue()
