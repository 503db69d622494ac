"""Files that change most often between consecutive commits."""

from __future__ import annotations

from collections import Counter
from typing import Mapping

from .gitcmd import GitError, RepoPath, _git

HOT_FILE_LIMIT = 10


def count_file_changes(repo_path: RepoPath) -> Counter[str]:
    """Count how often each file differs between neighbouring commits in date order.

    Pairs whose diff fails are skipped.
    """
    hashes = _git(repo_path, "rev-list", "--date-order", "HEAD", "--").split()
    counts: Counter[str] = Counter()
    for newer, older in zip(hashes, hashes[1:]):
        try:
            output = _git(repo_path, "diff", "--name-only", "--no-renames", "-z", older, newer, "--")
        except GitError:
            continue
        counts.update(filter(None, output.split("\0")))
    return counts


def top_files(counts: Mapping[str, int], limit: int = HOT_FILE_LIMIT) -> list[tuple[str, int]]:
    """Return the *limit* most changed files, most changes first, ties by name."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]


def analyze_hot_files(repo_path: RepoPath) -> list[tuple[str, int]]:
    """Print and return the ten most frequently changed files."""
    ranked = top_files(count_file_changes(repo_path))
    print("🔥 热点文件排行：")
    for position, (name, changes) in enumerate(ranked, start=1):
        print(f"{position:2d}. {name} ({changes} 次变更)")
    return ranked