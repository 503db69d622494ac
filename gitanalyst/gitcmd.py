"""Running git and reading repository history."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Iterable, Iterator, NamedTuple, Union

RepoPath = Union[str, "PathLike[str]"]

_SEP = "\x1f"
_COUNT = re.compile(r"[+-]?\d+")


class GitError(Exception):
    """Git could not be started (``returncode`` is None) or exited with a failure."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


@dataclass(frozen=True)
class Commit:
    hash: str
    author_name: str
    author_email: str
    when: datetime
    message: str


class _NumstatRecord(NamedTuple):
    commit: int
    name: str
    email: str
    additions: int
    deletions: int
    filename: str


def _git(repo_path: RepoPath, *args: str) -> str:
    """Run git in *repo_path* and return its standard output."""
    try:
        result = subprocess.run(
            ["git", "-C", str(repo_path), *args],
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise GitError(f"cannot run git: {exc}") from exc
    if result.returncode:
        raise GitError(
            f"git {args[0]} failed in {repo_path}: {result.stderr.strip()}",
            result.returncode,
        )
    return result.stdout


def git_log_lines(repo_path: RepoPath, *args: str) -> Iterator[str]:
    """Yield the output lines of ``git log`` run with *args* in *repo_path*."""
    try:
        proc = subprocess.Popen(
            ["git", "-C", str(repo_path), "log", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise GitError(f"cannot run git log: {exc}") from exc
    with proc:
        yield from (line.rstrip("\r\n") for line in proc.stdout)
        returncode = proc.wait()
    if returncode:
        raise GitError(f"git log failed in {repo_path} with status {returncode}", returncode)


def read_commits(repo_path: RepoPath, all_refs: bool = False) -> list[Commit]:
    """Return the commits reachable from HEAD, or from every ref, newest first."""
    output = _git(
        repo_path, "log", "-z", "--no-color",
        "--format=%H%x1f%an%x1f%ae%x1f%aI%x1f%B",
        "--all" if all_refs else "HEAD", "--",
    )
    commits = []
    for record in filter(None, (r.lstrip("\n") for r in output.split("\0"))):
        parts = record.split(_SEP, 4)
        if len(parts) != 5:
            raise GitError(f"unexpected git log record: {record[:40]!r}")
        commit_hash, name, email, date, message = parts
        commits.append(Commit(commit_hash, name, email, datetime.fromisoformat(date), message))
    return commits


def _numstat_records(lines: Iterable[str]) -> Iterator[_NumstatRecord]:
    """Parse ``--numstat --format=%H|%an|%ae`` output, skipping binary entries."""
    commit = 0
    name = email = ""
    for line in lines:
        if "|" in line:
            commit += 1
            parts = line.split("|")
            if len(parts) == 3:
                name, email = parts[1], parts[2]
        elif line:
            fields = line.split()
            if len(fields) >= 3 and _COUNT.fullmatch(fields[0]) and _COUNT.fullmatch(fields[1]):
                yield _NumstatRecord(commit, name, email, int(fields[0]), int(fields[1]), fields[2])