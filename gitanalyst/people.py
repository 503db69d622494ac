"""Commit activity per author, including commits made at night."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .gitcmd import Commit, RepoPath, read_commits


def is_night(when: datetime) -> bool:
    """Tell whether *when* falls between 22:00 and 06:00."""
    return when.hour >= 22 or when.hour < 6


def summarize_people(commits: Iterable[Commit]) -> dict[str, tuple[int, int]]:
    """Map each author name to (commits, night-time commits)."""
    summary: dict[str, tuple[int, int]] = {}
    for c in commits:
        count, night = summary.get(c.author_name, (0, 0))
        summary[c.author_name] = (count + 1, night + is_night(c.when))
    return summary


def analyze_people(repo_path: RepoPath) -> dict[str, tuple[int, int]]:
    """Print and return the activity summary of the commits reachable from HEAD."""
    summary = summarize_people(read_commits(repo_path))
    print("👨‍💻 活跃开发者统计：")
    for author, (count, night) in summary.items():
        print(f"- {author}: {count} commits, {night} 夜间提交")
    return summary