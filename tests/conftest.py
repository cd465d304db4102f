"""
Top-level pytest conftest.py -- shared fixtures.

Provides:
    has_git    - session-scoped check for git availability
    git_env    - environment for deterministic git commands
    local_repo - temporary directory with a deterministic git repo
"""

import os
import shutil
import subprocess

import pytest


@pytest.fixture(scope="session")
def has_git():
    """Check whether git is available on this system.

    Returns True if the ``git`` command is on PATH, False otherwise.
    """
    return shutil.which("git") is not None


@pytest.fixture
def requires_git(has_git):
    """Skip the test when git is not installed."""
    if not has_git:
        pytest.skip("git is not available")


@pytest.fixture
def git_env(tmp_path):
    """Environment for git subprocesses, isolated from user config."""
    env = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith(("GIT_", "BRANCH_GUARD_", "BRANCH_NAME_"))
    }
    env.update(
        {
            "HOME": str(tmp_path),
            "GIT_CONFIG_NOSYSTEM": "1",
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        }
    )
    return env


@pytest.fixture
def local_repo(tmp_path, git_env, requires_git):
    """Create a temporary directory containing a deterministic git repo.

    The repo has ``main`` as its default branch, a single ``README.md``,
    and one initial commit.  Yields the ``pathlib.Path`` to the repo root.
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    run_opts = {"cwd": str(repo), "env": git_env, "capture_output": True, "text": True}

    subprocess.run(["git", "init", "-b", "main"], check=True, **run_opts)
    (repo / "README.md").write_text("# Test Repository\n")
    subprocess.run(["git", "add", "README.md"], check=True, **run_opts)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"], check=True, **run_opts
    )

    yield repo
