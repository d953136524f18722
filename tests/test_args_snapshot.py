from __future__ import annotations

import dataclasses

import pytest

import collect_args
from collect_args import Args, load_config


def test_snapshot_is_immutable() -> None:
    args = Args(["a", "b"])
    assert args.args == ("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.args = ("c",)  # type: ignore[misc]


def test_snapshot_copies_source_list() -> None:
    tokens = ["a", "b"]
    args = Args(tokens)
    tokens.append("c")
    assert list(args) == ["a", "b"]
    assert len(args) == 2


def test_equality_by_tokens_only() -> None:
    assert Args(["a"]) == Args(("a",))
    assert hash(Args(["a"])) == hash(Args(["a"]))
    assert Args(["a"]) != Args(["b"])


def test_non_string_tokens_rejected() -> None:
    with pytest.raises(TypeError):
        Args(["a", 1])  # type: ignore[list-item]


def test_bare_string_tokens_rejected() -> None:
    with pytest.raises(TypeError):
        Args("--verbose")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Args.collect("prog --verbose")  # type: ignore[arg-type]


def test_collect_skips_program_name() -> None:
    args = Args.collect(["prog", "--out", "x"])
    assert args.args == ("--out", "x")


def test_collect_empty_argv() -> None:
    assert Args.collect([]).args == ()
    assert Args.collect(["prog"]).args == ()


def test_collect_reads_sys_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["prog", "-v"])
    args = collect_args.collect()
    assert args.flag("-v").present


def test_collect_honours_skip() -> None:
    cfg = load_config(skip=2)
    assert Args.collect(["python", "tool.py", "run"], config=cfg).args == ("run",)
    assert Args.collect(["a", "b", "c"], config=load_config(skip=0)).args == ("a", "b", "c")
