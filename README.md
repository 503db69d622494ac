# gitanalyst

A command-line tool that reads the history of a Git repository and reports
on it:

- who added the most lines in the last few days;
- additions, deletions and commits per author and file type, written as CSV,
  for one repository or for every repository in a directory;
- the files that change most often;
- how many commit messages follow the conventional `type(scope): subject`
  style;
- how many commits each author made, and how many of them at night;
- which commit messages mention credentials or other secrets.

It runs the `git` executable, so Git must be installed and on your `PATH`.
The package has no dependencies outside the Python standard library.

## Installation

```
pip install .
```

## Usage

```
git-analyst --repo PATH [--day N] [--csv FILE] COMMAND
```

`--repo` is required by every command. The options may be given before or
after the command name.

| Command         | What it does                                                                                   |
|-----------------|------------------------------------------------------------------------------------------------|
| `code-line-top` | Prints, per author e-mail, lines added and deleted and commits in the last `--day` days (default 30), most added lines first. Merge commits are left out. |
| `people`        | Prints the number of commits reachable from `HEAD` per author name, and how many of them were authored between 22:00 and 06:00 in the author's own time zone. |
| `hot`           | Prints the ten files that differ most often between neighbouring commits, taken in date order from `HEAD`. Ties are ordered by file name. |
| `style`         | Prints how many commit messages reachable from `HEAD` start with `feat`, `fix`, `docs`, `style`, `refactor`, `test` or `chore`, an optional `(scope)`, then `: ` and a subject, how many do not, and the share that do. |
| `secure`        | Prints every commit, reachable from any ref, whose message matches `apikey`, `secret`, `password`, `passwd`, `token`, `access key` or `private key` (case-insensitive, `_` or `-` allowed in the last two), with the patterns it matched. |
| `line`          | Writes additions, deletions and commits per author and file type over the whole history (merges left out) to `--csv`, replacing the file. |
| `multi-line`    | Does what `line` does for every direct subdirectory of `--repo` that contains `.git`, in name order, appending the rows to `--csv`. |

Examples:

```
git-analyst --repo ./myproject --day 7 code-line-top
git-analyst --repo ./myproject hot
git-analyst --repo ./myproject style
git-analyst --repo ./myproject --csv lines.csv line
git-analyst --repo ./workspace --csv all.csv multi-line
```

Without a command, the help text is printed. When `git` cannot be run or
fails, or a file cannot be written, the command prints `执行失败: ...` to
standard error and exits with status 1. `line` and `multi-line` also exit
with status 1 when `--repo` is not a directory or `--csv` is empty. In
`multi-line`, a repository that fails is reported and skipped and the rest
are still analysed.

The printed reports are in Chinese.

### The CSV file

The columns are `Project, Name, Email, FileType, Additions, Deletions,
Commits`. `Project` is the name of the repository's directory. `FileType` is
the lower-cased extension of the file name, such as `.py`, or `(no ext)` for
files without one. A commit counts once for each file type it touches.
Binary files, for which Git reports no line counts, are skipped. With
`multi-line` the header row is written only when the file does not exist
yet.

## Library use

The analyses are also functions that print their report and return the
results:

- `gitanalyst.recent.analyze_recent_top_authors(repo_path, days=30)` returns
  a dict of e-mail to `AuthorStat` (`name`, `email`, `additions`,
  `deletions`, `commits`);
- `gitanalyst.lines.analyze_by_author_and_file_type(repo_path, output_csv)`
  returns a dict of `StatKey` to `StatEntry`;
  `gitanalyst.lines.analyze_multiple_repos(directory, output_csv)` appends
  for many repositories;
- `gitanalyst.hotfiles.analyze_hot_files(repo_path)` returns
  `(file, changes)` pairs;
- `gitanalyst.style.analyze_commit_style(repo_path)` returns
  `(conforming, non_conforming)`;
- `gitanalyst.people.analyze_people(repo_path)` returns a dict of author name
  to `(commits, night_commits)`;
- `gitanalyst.security.scan_security_keywords(repo_path)` returns a dict of
  commit hash to matched patterns.

The pure parts work on data you already have: `tally_authors(lines)` and
`tally_by_author_and_file_type(lines, project)` on `git log --numstat
--format=%H|%an|%ae` output, `file_type(filename)`,
`top_files(counts, limit)`, `is_conventional(message)`,
`commit_style_counts(messages)`, `is_night(when)`,
`summarize_people(commits)`, `find_keywords(message)` and
`scan_messages(commits)`. `gitanalyst.gitcmd.read_commits(repo_path,
all_refs=False)` returns `Commit` objects (`hash`, `author_name`,
`author_email`, `when`, `message`); failures of `git` raise
`gitanalyst.gitcmd.GitError`.

## Running the tests

```
pip install .[test]
pytest
```