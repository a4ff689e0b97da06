"""Budgeted commit context builder for LLM commit message generation."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitctx")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
