"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .segment import MAX_SEGMENT_WIDTH

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Knobs read from ``NTHPRIME_*`` environment variables."""
    log_level: str = "WARNING"
    max_segment_width: int = MAX_SEGMENT_WIDTH

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        log_level = env.get("NTHPRIME_LOG_LEVEL", cls.log_level).upper()

        raw_width = env.get("NTHPRIME_MAX_SEGMENT_WIDTH")
        if raw_width is None:
            max_width = cls.max_segment_width
        else:
            try:
                max_width = int(raw_width)
            except ValueError:
                raise ValueError(
                    f"NTHPRIME_MAX_SEGMENT_WIDTH must be an integer, got {raw_width!r}"
                ) from None
            if max_width < 2:
                raise ValueError(f"NTHPRIME_MAX_SEGMENT_WIDTH must be at least 2, got {max_width}")

        return cls(log_level=log_level, max_segment_width=max_width)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
