import os
import subprocess

import pytest

from gitanalyst.gitcmd import GitError
from gitanalyst.hotfiles import analyze_hot_files, count_file_changes, top_files


def _git(repo, *args, date="2024-01-01 12:00:00 +0000"):
    env = {
        **os.environ,
        "GIT_AUTHOR_NAME": "Alice",
        "GIT_AUTHOR_EMAIL": "alice@example.com",
        "GIT_COMMITTER_NAME": "Alice",
        "GIT_COMMITTER_EMAIL": "alice@example.com",
        "GIT_AUTHOR_DATE": date,
        "GIT_COMMITTER_DATE": date,
        "GIT_CONFIG_NOSYSTEM": "1",
        "GIT_CONFIG_GLOBAL": os.devnull,
    }
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", "-C", str(repo), *args],
        check=True,
        env=env,
        capture_output=True,
    )


def _commit(repo, message, files, date):
    for rel, text in files.items():
        (repo / rel).write_text(text)
    _git(repo, "add", "-A", date=date)
    _git(repo, "commit", "-q", "-m", message, date=date)


@pytest.fixture
def repo(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    _git(path, "init", "-q")
    _commit(path, "init", {"a.txt": "1\n", "b.txt": "1\n"}, "2024-01-01 10:00:00 +0000")
    _commit(path, "second", {"a.txt": "2\n"}, "2024-01-02 10:00:00 +0000")
    _commit(path, "third", {"a.txt": "3\n", "c.txt": "1\n"}, "2024-01-03 10:00:00 +0000")
    return path


def test_top_files_orders_by_count_descending():
    assert top_files({"a": 1, "b": 3, "c": 2}) == [("b", 3), ("c", 2), ("a", 1)]


def test_top_files_breaks_ties_by_name():
    assert top_files({"z": 2, "m": 2, "a": 2}) == [("a", 2), ("m", 2), ("z", 2)]


def test_top_files_default_limit_is_ten():
    counts = {f"file{n:02d}": n for n in range(15)}
    ranked = top_files(counts)
    assert len(ranked) == 10
    assert ranked[0] == ("file14", 14)


def test_top_files_custom_limit():
    assert top_files({"a": 5, "b": 4, "c": 3}, 2) == [("a", 5), ("b", 4)]


def test_count_file_changes_between_neighbours(repo):
    counts = count_file_changes(repo)
    assert dict(counts) == {"a.txt": 2, "c.txt": 1}


def test_root_commit_files_are_not_counted(repo):
    assert "b.txt" not in count_file_changes(repo)


def test_single_commit_has_no_changes(tmp_path):
    _git(tmp_path, "init", "-q")
    _commit(tmp_path, "only", {"x.py": "print()\n"}, "2024-01-01 10:00:00 +0000")
    assert dict(count_file_changes(tmp_path)) == {}


def test_missing_repository_raises(tmp_path):
    with pytest.raises(GitError):
        count_file_changes(tmp_path / "missing")


def test_analyze_hot_files_prints_ranking(repo, capsys):
    ranked = analyze_hot_files(repo)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "🔥 热点文件排行："
    assert out[1] == f" 1. {ranked[0][0]} ({ranked[0][1]} 次变更)"
    assert len(out) == len(ranked) + 1