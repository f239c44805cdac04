import os
import subprocess
from pathlib import Path

import pytest

BASE_TIME = 1517122160


class RepoBuilder:
    """Creates commits with strictly increasing timestamps."""

    def __init__(self, path: Path):
        self.path = path
        self.tick = 0

    def git(self, *args: str) -> str:
        self.tick += 60
        stamp = f"{BASE_TIME + self.tick} +0000"
        env = {**os.environ, "GIT_AUTHOR_DATE": stamp, "GIT_COMMITTER_DATE": stamp}
        result = subprocess.run(
            ["git", *args], cwd=self.path, env=env, check=True, capture_output=True, text=True
        )
        return result.stdout

    def commit(self, message: str) -> str:
        self.git("commit", "--allow-empty", "-m", message)
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """
    Seven commits, one of them a merge:

        Initial -> (topic: docs) -> feat -> merge -> fix -> style -> release
    """
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    path = tmp_path / "repo"
    path.mkdir()

    builder = RepoBuilder(path)
    builder.git("init")
    builder.git("symbolic-ref", "HEAD", "refs/heads/master")
    builder.git("config", "--local", "user.name", "authorname")
    builder.git("config", "--local", "user.email", "mail@example.com")
    builder.git("config", "--local", "commit.gpgsign", "false")

    builder.commit("chore(*): Initial Commit")

    builder.git("checkout", "-b", "topic")
    builder.commit(
        "docs(readme): Has body commit message\n\n"
        "This is commit message body.\n"
        "There are no problems on multiple lines :)"
    )

    builder.git("checkout", "master")
    builder.commit("feat(parser): Add foo feature")
    builder.git("merge", "--no-ff", "topic", "-m", "Merge pull request #12 from tsuyoshiwada/topic")

    builder.commit("fix(logger): Fix bar function")
    builder.commit("style(*): Run GoFmt")
    builder.commit("chore(release): Bump version to v0.0.0")

    return path
