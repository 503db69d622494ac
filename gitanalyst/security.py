"""Commits whose messages mention credentials or other secrets."""

from __future__ import annotations

import re
from typing import Iterable

from .gitcmd import Commit, RepoPath, read_commits

SENSITIVE_PATTERNS = (
    r"(?i)apikey",
    r"(?i)secret",
    r"(?i)password",
    r"(?i)passwd",
    r"(?i)token",
    r"(?i)access[_-]?key",
    r"(?i)PRIVATE[_-]?KEY",
)

_COMPILED = [re.compile(pattern) for pattern in SENSITIVE_PATTERNS]


def find_keywords(message: str) -> list[str]:
    """Return the patterns, in their fixed order, that occur in *message*."""
    return [pattern.pattern for pattern in _COMPILED if pattern.search(message)]


def scan_messages(commits: Iterable[Commit]) -> dict[str, list[str]]:
    """Map the hash of every suspicious commit to the patterns it matched."""
    suspects: dict[str, list[str]] = {}
    for commit in commits:
        matches = find_keywords(commit.message)
        if matches:
            suspects.setdefault(commit.hash, []).extend(matches)
    return suspects


def scan_security_keywords(repo_path: RepoPath) -> dict[str, list[str]]:
    """Print and return the suspicious commits reachable from any ref."""
    suspects = scan_messages(read_commits(repo_path, all_refs=True))
    print("🔐 潜在敏感信息提交：")
    for commit_hash, matches in suspects.items():
        print(f"- Commit {commit_hash[:8]} 包含关键词: {', '.join(matches)}")
    return suspects