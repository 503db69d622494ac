"""Line counts per project, author and file type, written as CSV."""

from __future__ import annotations

import contextlib
import csv
import os
from dataclasses import dataclass
from typing import Iterable

from .gitcmd import GitError, RepoPath, _numstat_records, git_log_lines

CSV_HEADER = ["Project", "Name", "Email", "FileType", "Additions", "Deletions", "Commits"]
NO_EXTENSION = "(no ext)"


@dataclass(frozen=True)
class StatKey:
    """What one row of the statistics is grouped by."""

    project: str
    name: str
    email: str
    file_type: str


@dataclass
class StatEntry:
    """Totals for one StatKey."""

    additions: int = 0
    deletions: int = 0
    commits: int = 0


def file_type(filename: str) -> str:
    """Return the lower-cased extension of *filename*, or ``(no ext)``.

    The extension starts at the last dot of the final path element.
    """
    base = filename.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    extension = base[dot:].lower() if dot >= 0 else ""
    return extension or NO_EXTENSION


def tally_by_author_and_file_type(
    lines: Iterable[str], project: str
) -> dict[StatKey, StatEntry]:
    """Sum ``--numstat`` output per author and file type.

    A commit counts once for each file type it touches.
    """
    stats: dict[StatKey, StatEntry] = {}
    counted: set[tuple[int, str]] = set()
    for record in _numstat_records(lines):
        kind = file_type(record.filename)
        key = StatKey(project, record.name, record.email, kind)
        entry = stats.setdefault(key, StatEntry())
        entry.additions += record.additions
        entry.deletions += record.deletions
        if (record.commit, kind) not in counted:
            entry.commits += 1
            counted.add((record.commit, kind))
    return stats


def _rows(stats: dict[StatKey, StatEntry]) -> Iterable[list[str]]:
    for key, entry in stats.items():
        yield [
            key.project,
            key.name,
            key.email,
            key.file_type,
            str(entry.additions),
            str(entry.deletions),
            str(entry.commits),
        ]


def write_csv(stats: dict[StatKey, StatEntry], output_path: RepoPath) -> None:
    """Write *stats* to a new CSV file with a header row."""
    with open(output_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(_rows(stats))


def _project_name(repo_path: RepoPath) -> str:
    return os.path.basename(os.path.normpath(os.fspath(repo_path)))


def analyze_by_author_and_file_type(
    repo_path: RepoPath, output_csv: RepoPath
) -> dict[StatKey, StatEntry]:
    """Tally the whole history of *repo_path* and write it to *output_csv*."""
    lines = git_log_lines(repo_path, "--numstat", "--format=%H|%an|%ae", "--no-merges")
    stats = tally_by_author_and_file_type(lines, _project_name(repo_path))
    write_csv(stats, output_csv)
    return stats


def analyze_and_append_csv(repo_path: RepoPath, output_path: RepoPath) -> None:
    """Tally *repo_path* and append its rows to *output_path*.

    The header is written only when the file does not exist yet.
    """
    tmp_path = f"{os.fspath(output_path)}.tmp"
    analyze_by_author_and_file_type(repo_path, tmp_path)
    try:
        with open(tmp_path, newline="", encoding="utf-8") as handle:
            rows = list(csv.reader(handle))[1:]
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_path)

    is_new = not os.path.exists(output_path)
    with open(output_path, "a", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        if is_new:
            writer.writerow(CSV_HEADER)
        writer.writerows(rows)


def analyze_multiple_repos(directory: RepoPath, output_csv: RepoPath) -> None:
    """Append the statistics of every git repository directly under *directory*.

    A repository that fails is reported and skipped.
    """
    with os.scandir(directory) as entries:
        subdirs = sorted(
            (entry for entry in entries if entry.is_dir(follow_symlinks=False)),
            key=lambda entry: entry.name,
        )
    for entry in subdirs:
        subdir = os.path.join(os.fspath(directory), entry.name)
        if not os.path.exists(os.path.join(subdir, ".git")):
            continue
        print(f"📁 正在分析: {subdir}")
        try:
            analyze_and_append_csv(subdir, output_csv)
        except (GitError, OSError) as exc:
            print(f"⚠️ 分析失败: {exc}")
    print(f"✅ 汇总结果保存至: {os.fspath(output_csv)}")