import os
import shutil
import stat
import subprocess
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gitrev import __version__
from gitrev.cli.app import app
from gitrev.cli.report import USAGE, banner

runner = CliRunner()


@pytest.fixture
def template(tmp_path):
    path = tmp_path / "version.h.in"
    path.write_text("rev=$WCREV$ id=$WCREVID$ branch=$WCBRANCH$")
    return path


def invoke(*args):
    return runner.invoke(app, [str(arg) for arg in args])


def test_success(fake_git, repo_dir, template, tmp_path):
    output = tmp_path / "version.h"

    result = invoke(repo_dir, template, output)

    assert result.exit_code == 0
    assert result.output.startswith(f"{banner()}\n\n")
    assert "Done!" in result.output
    assert "Error:" not in result.output
    assert output.read_text() == "rev=17 id=abc123 branch=main"


def test_repository_with_trailing_separator(fake_git, repo_dir, template, tmp_path):
    result = invoke(f"{repo_dir}/", template, tmp_path / "out")
    assert result.exit_code == 0
    assert fake_git.calls[0][1] == repo_dir.resolve()


@pytest.mark.parametrize("count", [0, 1, 2, 4])
def test_wrong_argument_count(fake_git, tmp_path, count):
    args = [tmp_path / f"arg{i}" for i in range(count)]

    result = invoke(*args)

    assert result.exit_code == 1
    assert USAGE in result.output
    assert result.output.rstrip().endswith("Error: Incorrect number of arguments")
    assert fake_git.calls == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "args",
    (("-x", "-y", "-z", "-w"), ("--help",), ("-h",), ("--help", "a", "b", "c")),
)
def test_option_like_values_count_as_arguments(fake_git, args):
    result = invoke(*args)
    assert result.exit_code == 1
    assert USAGE in result.output
    assert "Error: Incorrect number of arguments" in result.output


def test_git_failure(fake_git, repo_dir, template, tmp_path):
    fake_git.fail_on = "rev-parse"
    output = tmp_path / "out.txt"
    start = Path.cwd()

    result = invoke(repo_dir, template, output)

    assert result.exit_code == 1
    assert "Error: Git error" in result.output
    assert not output.exists()
    assert Path.cwd() == start


def test_missing_source(fake_git, repo_dir, tmp_path):
    output = tmp_path / "out.txt"

    result = invoke(repo_dir, tmp_path / "missing.in", output)

    assert result.exit_code == 1
    assert "Error: Source file not found" in result.output
    assert not output.exists()


def test_missing_destination_directory(fake_git, repo_dir, template, tmp_path):
    output = tmp_path / "missing" / "out.txt"

    result = invoke(repo_dir, template, output)

    assert result.exit_code == 1
    assert "Error: Destination file could not be written" in result.output
    assert not output.parent.exists()


def test_relative_paths_resolve_against_start_directory(
    fake_git, repo_dir, template, tmp_path, monkeypatch
):
    monkeypatch.chdir(tmp_path)

    result = invoke("repo", template.name, "out.txt")

    assert result.exit_code == 0
    assert (tmp_path / "out.txt").read_text() == "rev=17 id=abc123 branch=main"
    assert Path.cwd() == tmp_path


def test_git_executable_from_environment(repo_dir, template, tmp_path, monkeypatch):
    monkeypatch.setenv("GITREV_GIT_EXECUTABLE", str(tmp_path / "no-such-git"))

    result = invoke(repo_dir, template, tmp_path / "out.txt")

    assert result.exit_code == 1
    assert "Error: Git error" in result.output


def _git(cwd, *args):
    return subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    ).stdout.strip()


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_against_real_repository(repo_dir, tmp_path):
    _git(repo_dir, "init", "-q")
    _git(repo_dir, "symbolic-ref", "HEAD", "refs/heads/main")
    for message in ("first", "second"):
        _git(
            repo_dir,
            "-c", "user.name=Build",
            "-c", "user.email=build@example.com",
            "-c", "commit.gpgsign=false",
            "commit", "-q", "--allow-empty", "-m", message,
        )
    _git(repo_dir, "tag", "v0.1")
    full_hash = _git(repo_dir, "rev-parse", "HEAD")

    template = tmp_path / "rev.in"
    template.write_text("$WCREVNUM$|$WCREVID$|$WCBRANCH$|$WCTAG$|$WCYEAR$")
    output = tmp_path / "rev.txt"

    result = invoke(repo_dir, template, output)

    assert result.exit_code == 0, result.output
    rev, short_id, branch, tag, year = output.read_text().split("|")
    assert rev == "2"
    assert short_id and full_hash.startswith(short_id)
    assert branch == "main"
    assert "v0.1" in tag and tag.endswith("$")
    assert len(year) == 4 and year.isdigit()


def test_banner():
    assert banner() == (
        f"GitRev v{__version__} by realloc.dev (https://github.com/realloc-dev/gitrev)"
    )


def test_file_mode_from_environment(fake_git, repo_dir, template, tmp_path, monkeypatch):
    output = tmp_path / "out.txt"
    output.write_text("old")
    os.chmod(output, 0o644)
    monkeypatch.setenv("GITREV_FILE_MODE", str(0o600))

    result = invoke(repo_dir, template, output)

    assert result.exit_code == 0
    assert stat.S_IMODE(os.stat(output).st_mode) == 0o600
