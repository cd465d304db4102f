"""Check command - validate branch names without pushing."""

from __future__ import annotations

import sys

import click

from branch_guard.commands._helpers import config_option, load_config_or_exit, pattern_option
from branch_guard.constants import PLUGIN_RETURN_PASSED, PLUGIN_RETURN_SKIPPED
from branch_guard.hook import check_branches, exit_code_for


@click.command()
@click.argument("branches", nargs=-1, required=True)
@config_option
@pattern_option
def check(branches: tuple[str, ...], config_path: str | None, pattern: str | None) -> None:
    """Check BRANCHES against the configured branch name pattern."""
    config = load_config_or_exit(config_path, pattern)

    # Same de-duplication as a push; keep the order given on the command line
    names = list(dict.fromkeys(branches))
    return_code = check_branches(names, config.pattern)

    if return_code == PLUGIN_RETURN_SKIPPED:
        click.echo("No branch name pattern configured, nothing to check.")
    elif return_code == PLUGIN_RETURN_PASSED:
        click.echo(f"All branch names match {config.pattern.description}: {', '.join(names)}")

    exit_code = exit_code_for(return_code)
    if exit_code:
        sys.exit(exit_code)
