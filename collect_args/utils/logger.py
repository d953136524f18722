# =====================================================================
# File: collect_args/utils/logger.py
# Leveled stderr logger for snapshot tracing and replay warnings
# =====================================================================
from __future__ import annotations
import sys
from typing import TextIO

ERROR, WARN, INFO, DEBUG = 0, 1, 2, 3
LEVELS = {ERROR: "ERROR", WARN: "WARN", INFO: "INFO", DEBUG: "DEBUG"}


def clamp_level(level: int) -> int:
    return max(0, min(3, level))


class Logger:
    """Print ``[LEVEL] message`` lines to stderr when ``level`` allows it."""

    def __init__(self, level: int = 1, stream: TextIO | None = None):
        self.level = clamp_level(level)
        self.stream = stream

    def _log(self, lvl: int, msg: str):
        if self.level >= lvl:
            # resolved per call so pytest's capsys sees the lines
            print(f"[{LEVELS.get(lvl, lvl)}] {msg}", file=self.stream or sys.stderr)

    def error(self, msg: str):
        self._log(0, msg)

    def warn(self, msg: str):
        self._log(1, msg)

    def info(self, msg: str):
        self._log(2, msg)

    def debug(self, msg: str):
        self._log(3, msg)
