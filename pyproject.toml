[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitanalyst"
version = "0.1.0"
description = "Command-line analytics for Git repositories: recent top authors, lines by file type, hot files, commit style, night-time commits and sensitive keywords"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "analytics", "statistics", "commits", "authors", "csv", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
git-analyst = "gitanalyst.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitanalyst"]

[tool.pytest.ini_options]
addopts = "-ra"
