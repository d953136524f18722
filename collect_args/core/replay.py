# =====================================================================
# File: collect_args/core/replay.py
# Recorded invocations: rebuild token lists from YAML files
# Accepts a bare list or a mapping with an `args` list
# =====================================================================

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union

import yaml

from ..utils.logger import Logger


def _token_list(data, path: Path) -> list:
    # BaseLoader gives "" (not None) for an empty `args:` value
    if data is None or data == "":
        return []
    if isinstance(data, dict):
        if "args" not in data:
            raise ValueError(f"{path}: mapping has no 'args' list")
        data = data["args"] if data["args"] not in (None, "") else []
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of tokens, got {type(data).__name__}")
    return data


def load_tokens(path: Union[str, Path], log: Optional[Logger] = None) -> List[str]:
    """
    Read a recorded invocation (tokens after the program name) from YAML.

    Scalars are kept exactly as written (``no`` stays ``"no"``, ``0755`` stays
    ``"0755"``); nested values are rejected.
    """
    log = log or Logger()
    path = Path(path)
    data = yaml.load(path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)

    tokens: List[str] = []
    for i, raw in enumerate(_token_list(data, path)):
        if not isinstance(raw, str):
            raise ValueError(f"{path}: token {i} is a {type(raw).__name__}, not a scalar")
        tokens.append(raw)

    log.info(f"loaded {len(tokens)} tokens from {path}")
    return tokens
