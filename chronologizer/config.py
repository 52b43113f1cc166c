# chronologizer/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .model import ConfigError

DISPLAY_LOCALE = "en-US"

ENV_WIDTH = "CHRONOLOGIZER_WIDTH"
ENV_ROW_HEIGHT = "CHRONOLOGIZER_ROW_HEIGHT"


@dataclass(frozen=True)
class TimelineConfig:
    width: int = 1000
    margin_left: int = 120
    margin_right: int = 120
    margin_top: int = 20
    row_height: int = 60
    empty_height: int = 100
    locale: str = DISPLAY_LOCALE

    def __post_init__(self) -> None:
        if self.available_width <= 0:
            raise ConfigError(
                f"width ({self.width}) must exceed margins "
                f"({self.margin_left}+{self.margin_right})"
            )
        if self.row_height <= 0:
            raise ConfigError(f"row_height must be positive; got {self.row_height}")
        if min(self.margin_left, self.margin_right, self.margin_top) < 0:
            raise ConfigError("margins must be non-negative")
        if self.locale != DISPLAY_LOCALE:
            raise ConfigError(f"Unsupported locale: {self.locale!r} (only {DISPLAY_LOCALE})")

    @property
    def available_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    def with_overrides(self, **kw: Optional[int]) -> "TimelineConfig":
        changes = {k: v for k, v in kw.items() if v is not None}
        return replace(self, **changes) if changes else self


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer; got {raw!r}") from None


def config_from_env(env: Optional[Mapping[str, str]] = None, base: Optional[TimelineConfig] = None) -> TimelineConfig:
    """Defaults overlaid with CHRONOLOGIZER_* environment variables."""
    e = os.environ if env is None else env
    cfg = base or TimelineConfig()
    return cfg.with_overrides(
        width=_env_int(e, ENV_WIDTH),
        row_height=_env_int(e, ENV_ROW_HEIGHT),
    )


__all__ = ["DISPLAY_LOCALE", "ENV_WIDTH", "ENV_ROW_HEIGHT", "TimelineConfig", "config_from_env"]
