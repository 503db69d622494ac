"""Command-line entry point for the repository analyses."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Sequence

from .gitcmd import GitError
from .hotfiles import analyze_hot_files
from .lines import analyze_by_author_and_file_type, analyze_multiple_repos
from .people import analyze_people
from .recent import analyze_recent_top_authors
from .security import scan_security_keywords
from .style import analyze_commit_style


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _run_recent(args: argparse.Namespace) -> int:
    analyze_recent_top_authors(args.repo, args.day)
    return 0


def _run_people(args: argparse.Namespace) -> int:
    analyze_people(args.repo)
    return 0


def _run_hot(args: argparse.Namespace) -> int:
    analyze_hot_files(args.repo)
    return 0


def _run_style(args: argparse.Namespace) -> int:
    analyze_commit_style(args.repo)
    return 0


def _run_secure(args: argparse.Namespace) -> int:
    scan_security_keywords(args.repo)
    return 0


def _run_line(args: argparse.Namespace) -> int:
    if not os.path.isdir(args.repo):
        return _fail(f"指定的目录无效: {args.repo}")
    if not args.csv:
        return _fail(f"csv 无效: {args.csv}")
    analyze_by_author_and_file_type(args.repo, args.csv)
    return 0


def _run_multi_line(args: argparse.Namespace) -> int:
    if not args.csv:
        return _fail(f"csv 无效: {args.csv}")
    if not os.path.isdir(args.repo):
        return _fail(f"指定的目录无效: {args.repo}")
    analyze_multiple_repos(args.repo, args.csv)
    return 0


_COMMANDS: dict[str, tuple[str, Callable[[argparse.Namespace], int]]] = {
    "code-line-top": ("统计最近多少天内，代码提交最多的开发者", _run_recent),
    "people": ("分析开发者活跃度、夜间提交等", _run_people),
    "hot": ("分析热点文件", _run_hot),
    "style": ("分析提交规范一致性", _run_style),
    "secure": ("扫描潜在敏感信息提交", _run_secure),
    "line": ("统计代码行数", _run_line),
    "multi-line": ("批量分析目录下所有 Git 仓库的代码行数", _run_multi_line),
}


def _add_options(parser: argparse.ArgumentParser, with_defaults: bool) -> None:
    def default(value):
        return value if with_defaults else argparse.SUPPRESS

    parser.add_argument("--repo", default=default(None),
                        help="Path to Git repository (required)")
    parser.add_argument("--csv", default=default(""), help="csv for result")
    parser.add_argument("--day", type=int, default=default(30),
                        help="How long to analyze the recent top authors")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-analyst", description="Git Intelligence Analyzer CLI"
    )
    _add_options(parser, with_defaults=True)
    shared = argparse.ArgumentParser(add_help=False)
    _add_options(shared, with_defaults=False)
    subparsers = parser.add_subparsers(dest="command")
    for name, (summary, _) in _COMMANDS.items():
        subparsers.add_parser(name, help=summary, description=summary, parents=[shared])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analysis named on the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    if args.repo is None:
        parser.error('required flag "repo" not set')
    _, handler = _COMMANDS[args.command]
    try:
        return handler(args)
    except (GitError, OSError) as exc:
        return _fail(f"执行失败: {exc}")


if __name__ == "__main__":
    raise SystemExit(main())