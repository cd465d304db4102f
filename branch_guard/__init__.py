"""branch-guard - git pre-push hook enforcing a branch naming pattern."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("branch-guard")
except PackageNotFoundError:
    __version__ = "1.0.0"  # fallback for editable installs / dev
