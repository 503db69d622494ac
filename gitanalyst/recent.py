"""Lines added and removed per author over a recent period."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .gitcmd import GitError, RepoPath, _numstat_records, git_log_lines


@dataclass
class AuthorStat:
    name: str
    email: str
    additions: int = 0
    deletions: int = 0
    commits: int = 0


def tally_authors(lines: Iterable[str]) -> dict[str, AuthorStat]:
    """Sum ``--numstat`` output per author e-mail, counting each commit once."""
    stats: dict[str, AuthorStat] = {}
    counted: set[int] = set()
    for rec in _numstat_records(lines):
        stat = stats.setdefault(rec.email, AuthorStat(rec.name, rec.email))
        stat.additions += rec.additions
        stat.deletions += rec.deletions
        if rec.commit not in counted:
            stat.commits += 1
            counted.add(rec.commit)
    return stats


def format_author_report(stats: dict[str, AuthorStat], days: int) -> str:
    """Render the per-author table, most added lines first."""
    out = [
        f"🕒 最近 {days} 天提交活跃统计（按代码行数排序）:",
        f"{'Author':<20} {'Add':<6} {'Del':<6} {'Commits':<6}",
        "-" * 50,
    ]
    for s in sorted(stats.values(), key=lambda s: s.additions, reverse=True):
        out.append(f"{s.email:<20} {s.additions:<6} {s.deletions:<6} {s.commits:<6}")
    return "\n".join(out) + "\n"


def analyze_recent_top_authors(repo_path: RepoPath, days: int = 30) -> dict[str, AuthorStat]:
    """Print and return author totals for the last *days* days.

    A git failure after it started only ends the output early.
    """
    lines = git_log_lines(
        repo_path, f"--since={days} days ago", "--numstat", "--format=%H|%an|%ae", "--no-merges"
    )
    stats: dict[str, AuthorStat] = {}
    collected: list[str] = []
    try:
        collected.extend(lines)
    except GitError as exc:
        if exc.returncode is None:
            raise
    stats = tally_authors(collected)
    print(format_author_report(stats, days), end="")
    return stats