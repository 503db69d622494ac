import csv
import os
import subprocess

import pytest

from gitanalyst.cli import main


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


@pytest.fixture
def repo(tmp_path):
    path = tmp_path / "demo"
    path.mkdir()
    _git(path, "init", "-q")
    for n, message in enumerate(["feat: start", "misc"]):
        (path / "main.py").write_text(f"x = {n}\n")
        _git(path, "add", "-A")
        _git(path, "commit", "-q", "-m", message)
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "code-line-top" in capsys.readouterr().out


def test_missing_repo_flag_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["people"])
    assert info.value.code == 2


def test_unknown_command_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["--repo", ".", "nonsense"])
    assert info.value.code == 2


def test_line_rejects_missing_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main(["--repo", str(missing), "--csv", "out.csv", "line"]) == 1
    assert f"指定的目录无效: {missing}" in capsys.readouterr().err


def test_line_requires_csv(tmp_path, capsys):
    assert main(["--repo", str(tmp_path), "line"]) == 1
    assert "csv 无效" in capsys.readouterr().err


def test_multi_line_checks_csv_before_directory(tmp_path, capsys):
    assert main(["--repo", str(tmp_path / "missing"), "multi-line"]) == 1
    err = capsys.readouterr().err
    assert "csv 无效" in err
    assert "指定的目录无效" not in err


def test_people_on_missing_repo_fails(tmp_path, capsys):
    assert main(["people", "--repo", str(tmp_path / "missing")]) == 1
    assert "执行失败" in capsys.readouterr().err


def test_flags_after_subcommand(repo, capsys):
    assert main(["style", "--repo", str(repo)]) == 0
    assert "📊 合规率: 50.00%" in capsys.readouterr().out


def test_line_writes_csv(repo, tmp_path):
    output = tmp_path / "out.csv"
    assert main(["--repo", str(repo), "--csv", str(output), "line"]) == 0
    with open(output, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["Project", "Name", "Email", "FileType", "Additions", "Deletions", "Commits"]
    assert {row[0] for row in rows[1:]} == {"demo"}
    assert {row[3] for row in rows[1:]} == {".py"}


def test_multi_line_collects_repositories(repo, tmp_path, capsys):
    output = tmp_path / "all.csv"
    assert main(["multi-line", "--repo", str(tmp_path), "--csv", str(output)]) == 0
    assert output.exists()
    assert "✅ 汇总结果保存至" in capsys.readouterr().out