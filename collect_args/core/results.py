# =====================================================================
# File: collect_args/core/results.py
# Named result tuples returned by the snapshot queries
# =====================================================================
from __future__ import annotations
from typing import NamedTuple, Optional


class Lookup(NamedTuple):
    """``(key, value)`` pair; ``value`` is None when nothing was found."""

    key: str
    value: Optional[str]

    @property
    def found(self) -> bool:
        return self.value is not None

    def or_default(self, default: str) -> str:
        return self.value if self.value is not None else default


class Flag(NamedTuple):
    name: str
    present: bool

    def __bool__(self) -> bool:
        return self.present
