# tests/test_gitlog.py
import os
import subprocess

import pytest

from gitlog import (
    BinaryNotFound,
    CommandExecutionFailed,
    Config,
    GitLog,
    InvalidWorkingDirectory,
    NotARepository,
    Params,
    Rev,
    RevNumber,
    RevRange,
    build_args,
    new,
)
from gitlog.template import LOG_FORMAT

NEWEST_FIRST = [
    ("chore(release): Bump version to v0.0.0", ""),
    ("style(*): Run GoFmt", ""),
    ("fix(logger): Fix bar function", ""),
    ("Merge pull request #12 from tsuyoshiwada/topic", ""),
    ("feat(parser): Add foo feature", ""),
    (
        "docs(readme): Has body commit message",
        "This is commit message body.\nThere are no problems on multiple lines :)",
    ),
    ("chore(*): Initial Commit", ""),
]


def test_new_accepts_missing_or_empty_config():
    assert new().config == Config(bin="git", path=".")
    assert new(Config()).config.bin == "git"
    assert new(Config(bin="")).config.bin == "git"
    assert new(Config(path="")).config.path == "."


def test_build_args_defaults():
    assert build_args() == ["--no-decorate", f'--pretty="{LOG_FORMAT}"']


def test_build_args_params_and_revision():
    args = build_args(RevNumber(3), Params(merges_only=True, ignore_merges=True, reverse=True))

    assert args[2:] == ["--merges", "--no-merges", "--reverse", "-n", "3"]


def test_log(repo):
    """Should return every commit newest first with decoded fields."""
    commits = GitLog(Config(path=str(repo))).log()

    assert len(commits) == 7
    assert [(c.subject, c.body) for c in commits] == NEWEST_FIRST

    for commit in commits:
        assert commit.author.name == "authorname"
        assert commit.author.email == "mail@example.com"
        assert commit.committer.name == "authorname"
        assert commit.hash.long
        assert commit.hash.long.startswith(commit.hash.short)
        assert commit.tree.long
        assert commit.tree.long.startswith(commit.tree.short)


def test_log_hashes_match_git(repo):
    head = subprocess.run(
        ["git", "rev-parse", "HEAD"], cwd=repo, check=True, capture_output=True, text=True
    ).stdout.strip()

    commits = GitLog(Config(path=str(repo))).log(Rev("HEAD"))

    assert commits[0].hash.long == head


def test_log_timestamps(repo):
    commits = GitLog(Config(path=str(repo))).log()

    dates = [c.author.date for c in commits]
    assert dates == sorted(dates, reverse=True)
    assert all(d.tzinfo is not None for d in dates)


def test_log_number(repo):
    commits = GitLog(Config(path=str(repo))).log(RevNumber(2))

    assert [c.subject for c in commits] == [
        "chore(release): Bump version to v0.0.0",
        "style(*): Run GoFmt",
    ]


def test_log_range(repo):
    commits = GitLog(Config(path=str(repo))).log(RevRange(old="HEAD~2", new="HEAD"))

    assert [c.subject for c in commits] == [
        "chore(release): Bump version to v0.0.0",
        "style(*): Run GoFmt",
    ]


def test_log_empty_range_returns_no_commits(repo):
    assert GitLog(Config(path=str(repo))).log(RevRange(old="HEAD", new="HEAD")) == []


def test_log_merges_only(repo):
    commits = GitLog(Config(path=str(repo))).log(params=Params(merges_only=True))

    assert len(commits) == 1
    assert commits[0].subject == "Merge pull request #12 from tsuyoshiwada/topic"


def test_log_ignore_merges(repo):
    commits = GitLog(Config(path=str(repo))).log(params=Params(ignore_merges=True))

    assert len(commits) == 6


def test_log_reverse(repo):
    commits = GitLog(Config(path=str(repo))).log(params=Params(reverse=True))

    assert [(c.subject, c.body) for c in commits] == list(reversed(NEWEST_FIRST))


def test_log_restores_cwd(repo):
    before = os.getcwd()

    GitLog(Config(path=str(repo))).log()

    assert os.getcwd() == before


def test_log_binary_not_found(repo):
    git = GitLog(Config(bin="/notfound/git/bin", path=str(repo)))

    with pytest.raises(BinaryNotFound, match="does not exists"):
        git.log()


def test_log_path_not_found(tmp_path):
    before = os.getcwd()
    git = GitLog(Config(path=str(tmp_path / "notfound" / "repo")))

    with pytest.raises(InvalidWorkingDirectory, match="No such file or directory"):
        git.log()

    assert os.getcwd() == before


def test_log_not_a_repository(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    plain = tmp_path / "plain"
    plain.mkdir()
    before = os.getcwd()

    with pytest.raises(NotARepository):
        GitLog(Config(path=str(plain))).log()

    assert os.getcwd() == before


def test_log_unknown_revision(repo):
    before = os.getcwd()

    with pytest.raises(CommandExecutionFailed) as exc_info:
        GitLog(Config(path=str(repo))).log(Rev("does-not-exist"))

    assert exc_info.value.returncode != 0
    assert os.getcwd() == before


def test_log_tag_decoration(repo):
    """Should surface ref decoration of tagged commits despite --no-decorate."""
    subprocess.run(["git", "tag", "v0.0.0"], cwd=repo, check=True, capture_output=True)

    commits = GitLog(Config(path=str(repo))).log()

    assert commits[0].tag is not None
    assert "tag: v0.0.0" in commits[0].tag.name
    assert "master" in commits[0].tag.name
    assert commits[1].tag is None
