# =====================================================================
# File: collect_args/core/config.py
# Snapshot configuration and defaults
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass

from ..utils.logger import Logger, clamp_level

DEFAULT_SKIP = 1        # program name
DEFAULT_LOG_LEVEL = 1   # WARN


@dataclass(frozen=True)
class CollectConfig:
    skip: int = DEFAULT_SKIP
    log_level: int = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.skip < 0:
            raise ValueError(f"skip must be >= 0, got {self.skip}")

    def make_logger(self) -> Logger:
        return Logger(level=self.log_level)


def load_config(
    skip: int = DEFAULT_SKIP,
    log_level: int = DEFAULT_LOG_LEVEL,
    debug_level: int = 0,
) -> CollectConfig:
    """Build a config; ``debug_level`` raises verbosity like a repeated --debug."""
    return CollectConfig(
        skip=skip,
        log_level=clamp_level(log_level + max(0, debug_level)),
    )
