"""Subcommands of the branch-guard CLI, loaded lazily by branch_guard.cli."""
