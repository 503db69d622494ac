"""Conformance of commit messages to the conventional commit style."""

from __future__ import annotations

import re
from typing import Iterable

from .gitcmd import RepoPath, read_commits

STYLE_PATTERN = re.compile(r"^(feat|fix|docs|style|refactor|test|chore)(\(.*\))?: .+")


def is_conventional(message: str) -> bool:
    """Tell whether *message* starts with a conventional type prefix."""
    return STYLE_PATTERN.match(message) is not None


def commit_style_counts(messages: Iterable[str]) -> tuple[int, int]:
    """Return how many *messages* conform and how many do not."""
    ok = bad = 0
    for message in messages:
        if is_conventional(message):
            ok += 1
        else:
            bad += 1
    return ok, bad


def analyze_commit_style(repo_path: RepoPath) -> tuple[int, int]:
    """Print and return the conforming and non-conforming commit counts."""
    ok, bad = commit_style_counts(c.message for c in read_commits(repo_path))
    total = ok + bad
    rate = f"{ok / total * 100:.2f}" if total else "NaN"
    print(f"✅ 符合提交规范的数量: {ok}")
    print(f"⚠️ 不符合提交规范的数量: {bad}")
    print(f"📊 合规率: {rate}%")
    return ok, bad