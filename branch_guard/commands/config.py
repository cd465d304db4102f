"""Config command - show where the branch name pattern comes from."""

from __future__ import annotations

import json

import click

from branch_guard.commands._helpers import config_option, load_config_or_exit
from branch_guard.utils import BOLD, RESET, format_kv


@click.command()
@config_option
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def config(config_path: str | None, json_output: bool) -> None:
    """Show the effective branch-guard configuration."""
    cfg = load_config_or_exit(config_path, None)

    config_file = str(cfg.config_path) if cfg.config_path else None
    pattern = cfg.pattern.description if cfg.pattern else None

    if json_output:
        data = {
            "config_file": config_file,
            "pattern": pattern,
            "pattern_source": cfg.pattern_source,
            "enabled": cfg.pattern is not None,
        }
        click.echo(json.dumps(data))
        return

    click.echo(f"{BOLD}Branch guard config{RESET}")
    click.echo(format_kv("config_file", config_file or "(none)"))
    click.echo(format_kv("pattern", pattern or "(none, pushes are not checked)"))
    if cfg.pattern_source:
        click.echo(format_kv("pattern_source", cfg.pattern_source))
