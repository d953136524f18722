# =====================================================================
# File: collect_args/__init__.py
# Public surface of the collect_args package
# =====================================================================
"""
Read-only lookups over the process invocation tokens.

    from collect_args import collect

    args = collect()
    _, out = args.input("--out")
    _, mode = args.select("--mode", ["fast", "safe"])
    verbose = args.flag("-v").present
"""
from __future__ import annotations

from .core.args import Args, collect
from .core.config import CollectConfig, load_config
from .core.replay import load_tokens
from .core.results import Flag, Lookup
from .utils.logger import Logger

__all__ = [
    "Args",
    "CollectConfig",
    "Flag",
    "Logger",
    "Lookup",
    "collect",
    "load_config",
    "load_tokens",
]
