"""Allow ``python -m branch_guard``."""

from branch_guard.cli import main

main()
