"""Unit tests for the pre-push hook runner.

Covers plugin return codes, exit status mapping, the consolidated
violation message and debug logging.
"""

import pytest

from branch_guard.constants import (
    PLUGIN_RETURN_FAILED,
    PLUGIN_RETURN_PASSED,
    PLUGIN_RETURN_SKIPPED,
)
from branch_guard.enforcer import enforce
from branch_guard.hook import (
    check_branches,
    exit_code_for,
    format_violation_message,
    run_pre_push,
)
from branch_guard.pattern import MatchPattern

SHA_A = "a" * 40
SHA_B = "b" * 40


@pytest.fixture(autouse=True)
def no_debug(monkeypatch):
    monkeypatch.delenv("BRANCH_GUARD_DEBUG", raising=False)


@pytest.fixture
def alnum():
    return MatchPattern.compile("/^[a-zA-Z0-9]+$/")


class TestRunPrePush:
    """Tests for run_pre_push()."""

    def test_matching_branch_passes(self, alnum, capsys):
        assert run_pre_push(["refs/heads/test a b c\n"], alnum) == PLUGIN_RETURN_PASSED
        assert capsys.readouterr().err == ""

    def test_violating_branch_fails(self, alnum, capsys):
        assert run_pre_push(["refs/heads/test_ a b c\n"], alnum) == PLUGIN_RETURN_FAILED
        err = capsys.readouterr().err
        assert "does not match the pattern" in err
        assert "test_" in err

    def test_no_pattern_skips(self, capsys):
        assert run_pre_push(["refs/heads/test_ a b c\n"], None) == PLUGIN_RETURN_SKIPPED
        assert capsys.readouterr().err == ""

    def test_tag_only_push_skips(self, alnum):
        assert run_pre_push([f"refs/tags/v1 {SHA_A} refs/tags/v1 {SHA_B}\n"], alnum) == (
            PLUGIN_RETURN_SKIPPED
        )

    def test_empty_stdin_skips(self, alnum):
        assert run_pre_push([], alnum) == PLUGIN_RETURN_SKIPPED

    def test_all_violations_in_one_message(self, alnum, capsys):
        lines = [
            "refs/heads/good a b c\n",
            "refs/heads/bad_two a b c\n",
            "refs/heads/bad_one a b c\n",
        ]
        assert run_pre_push(lines, alnum) == PLUGIN_RETURN_FAILED
        err = capsys.readouterr().err
        assert err.count("do not match the pattern") == 1
        assert "bad_one, bad_two." in err
        assert "good" not in err

    def test_debug_logging(self, alnum, capsys, monkeypatch):
        monkeypatch.setenv("BRANCH_GUARD_DEBUG", "1")
        lines = [f"refs/heads/test {SHA_A} refs/heads/test {'0' * 40}\n"]
        run_pre_push(lines, alnum)
        err = capsys.readouterr().err
        assert "(create)" in err
        assert "Found 1 branch(es) to push: test" in err
        assert "Branch test matches the required pattern." in err

    def test_debug_logging_skip_reason(self, capsys, monkeypatch):
        monkeypatch.setenv("BRANCH_GUARD_DEBUG", "1")
        run_pre_push(["refs/heads/test a b c\n"], None)
        assert "No 'branch_name_pattern' specified" in capsys.readouterr().err


class TestCheckBranches:
    """Tests for check_branches()."""

    def test_pass(self, alnum):
        assert check_branches(["main"], alnum) == PLUGIN_RETURN_PASSED

    def test_fail(self, alnum, capsys):
        assert check_branches(["main", "bad branch"], alnum) == PLUGIN_RETURN_FAILED
        assert "bad branch" in capsys.readouterr().err


class TestFormatViolationMessage:
    """Tests for the consolidated error message."""

    def test_single_violation(self, alnum):
        message = format_violation_message(enforce(["test_"], alnum))
        assert message == (
            "The following branch does not match the pattern enforced by the git "
            "hooks configuration file: test_.\n"
            "Branches must match the following pattern: /^[a-zA-Z0-9]+$/."
        )

    def test_multiple_violations(self, alnum):
        message = format_violation_message(enforce(["a_", "b_"], alnum))
        assert message.startswith(
            "The following branches do not match the pattern enforced by the git "
            "hooks configuration file: a_, b_.\n"
        )


class TestExitCodeFor:
    """Plugin return codes map to hook exit statuses."""

    @pytest.mark.parametrize(
        "return_code,expected",
        [
            (PLUGIN_RETURN_PASSED, 0),
            (PLUGIN_RETURN_SKIPPED, 0),
            (PLUGIN_RETURN_FAILED, 1),
        ],
    )
    def test_mapping(self, return_code, expected):
        assert exit_code_for(return_code) == expected
