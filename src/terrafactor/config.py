"""Render settings assembled from defaults, environment variables and CLI options."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from terrafactor.errors import ConfigError
from terrafactor.model.operation import DEFAULT_PALETTE, PLAIN_PALETTE, Palette

logger = logging.getLogger(__name__)

ENV_INDENT: str = "TERRAFACTOR_INDENT"
ENV_TIMEOUT: str = "TERRAFACTOR_TIMEOUT"
ENV_VERIFY_TLS: str = "TERRAFACTOR_VERIFY_TLS"
ENV_NO_COLOR: str = "NO_COLOR"

_FALSE_WORDS: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class RenderSettings:
    """Immutable settings for one CLI invocation.

    Attributes:
        indent: Spaces per nesting level.
        color: Wrap markers in ANSI colour codes.
        timeout_s: Request timeout for URL sources, in seconds.
        verify_tls: Verify TLS certificates for ``https`` sources.
    """

    indent: int = 4
    color: bool = True
    timeout_s: float = 30.0
    verify_tls: bool = True

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ConfigError(f"indent must be >= 0, got {self.indent}")
        if not math.isfinite(self.timeout_s) or self.timeout_s <= 0:
            raise ConfigError(f"timeout must be a finite number > 0, got {self.timeout_s}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> RenderSettings:
        """Build settings from environment variables, falling back to defaults.

        ``NO_COLOR`` disables colour when set to any non-empty value.
        """
        kwargs: dict[str, Any] = {}
        if environ.get(ENV_INDENT):
            kwargs["indent"] = _parse_number(ENV_INDENT, environ[ENV_INDENT], int)
        if environ.get(ENV_TIMEOUT):
            kwargs["timeout_s"] = _parse_number(ENV_TIMEOUT, environ[ENV_TIMEOUT], float)
        if environ.get(ENV_VERIFY_TLS):
            kwargs["verify_tls"] = environ[ENV_VERIFY_TLS].lower() not in _FALSE_WORDS
        if environ.get(ENV_NO_COLOR):
            kwargs["color"] = False
        settings = cls(**kwargs)
        logger.debug("Settings from environment: %s", settings)
        return settings

    def override(self, **changes: Any) -> RenderSettings:
        """Return a copy with every non-``None`` value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def indent_unit(self) -> str:
        return " " * self.indent

    @property
    def palette(self) -> Palette:
        return DEFAULT_PALETTE if self.color else PLAIN_PALETTE


def _parse_number(name: str, raw: str, kind: type[int] | type[float]) -> Any:
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
