# =====================================================================
# File: collect_args/core/args.py
# Argument snapshot: read-only lookups over the invocation tokens
# =====================================================================
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from .config import CollectConfig
from .replay import load_tokens
from .results import Flag, Lookup
from ..utils.logger import DEBUG, Logger


def _as_set(values: Iterable[str], what: str) -> frozenset:
    # a bare string would be matched character by character
    if isinstance(values, str):
        raise TypeError(f"{what} must be a collection of strings, not str {values!r}")
    return frozenset(values)


@dataclass(frozen=True)
class Args:
    """
    Immutable snapshot of the invocation tokens (program name removed).

    Every query is a pure scan of ``args``; nothing found is reported as
    ``None`` / ``False``, never raised.
    """

    args: Tuple[str, ...] = ()
    log: Logger = field(default_factory=Logger, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.args, str):
            raise TypeError(f"args must be a sequence of strings, not str {self.args!r}")
        tokens = tuple(self.args)
        for i, tok in enumerate(tokens):
            if not isinstance(tok, str):
                raise TypeError(f"token {i} must be str, got {type(tok).__name__}: {tok!r}")
        object.__setattr__(self, "args", tokens)

    # --------------------------- Construction ---------------------------
    @classmethod
    def collect(
        cls,
        argv: Optional[Sequence[str]] = None,
        config: Optional[CollectConfig] = None,
    ) -> "Args":
        """Snapshot ``sys.argv`` (or ``argv``) minus the leading program name."""
        cfg = config or CollectConfig()
        log = cfg.make_logger()
        source = sys.argv if argv is None else argv
        if isinstance(source, str):
            raise TypeError(f"argv must be a sequence of strings, not str {source!r}")
        snap = cls(tuple(source)[cfg.skip:], log=log)
        log.info(f"collected {len(snap.args)} tokens")
        return snap

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[CollectConfig] = None,
    ) -> "Args":
        """Rebuild a snapshot from a recorded invocation (see ``replay``)."""
        log = (config or CollectConfig()).make_logger()
        return cls(load_tokens(path, log=log), log=log)

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    # ------------------------------ Queries ------------------------------
    def _after_first(self, key: str) -> Optional[str]:
        """Token right after the first occurrence of ``key`` that has one."""
        for i, tok in enumerate(self.args[:-1]):
            if tok == key:
                return self.args[i + 1]
        return None

    def input(self, key: str) -> Lookup:
        """Value following ``key``: ``["--out", "a.txt"]`` gives ``("--out", "a.txt")``."""
        value = self._after_first(key)
        self.log.debug(f"input {key} -> {value}")
        return Lookup(key, value)

    def select(self, key: str, allowed: Iterable[str]) -> Lookup:
        """
        Like ``input`` but the value must be one of ``allowed``.

        Only the first occurrence of ``key`` is inspected; if its value is not
        allowed the result is absent even when a later occurrence would match.
        """
        allowed_set = _as_set(allowed, "allowed")
        value = None
        try:
            i = self.args.index(key)
        except ValueError:
            i = -1
        if 0 <= i < len(self.args) - 1 and self.args[i + 1] in allowed_set:
            value = self.args[i + 1]
        if self.log.level >= DEBUG:
            self.log.debug(f"select {key} {sorted(allowed_set)} -> {value}")
        return Lookup(key, value)

    def options(self, candidates: Iterable[str]) -> Optional[str]:
        """First token (in command-line order) that is one of ``candidates``."""
        wanted = _as_set(candidates, "candidates")
        found = next((tok for tok in self.args if tok in wanted), None)
        if self.log.level >= DEBUG:
            self.log.debug(f"options {sorted(wanted)} -> {found}")
        return found

    def flag(self, name: str) -> Flag:
        present = name in self.args
        self.log.debug(f"flag {name} -> {present}")
        return Flag(name, present)


def collect(
    argv: Optional[Sequence[str]] = None,
    config: Optional[CollectConfig] = None,
) -> Args:
    return Args.collect(argv, config=config)
