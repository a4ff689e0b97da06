"""Exception classes for commitctx.

Contains:
- CommitCtxError: Base exception for commitctx errors
- ChangeSetLoadError: Raised when a change set or analysis document cannot be loaded
- ConfigError: Raised when the repository configuration holds invalid values

Prompt building itself never raises these: budget exhaustion is handled by
omitting diffs, not by failing.
"""


class CommitCtxError(Exception):
    """Base exception for commitctx errors."""

    pass


class ChangeSetLoadError(CommitCtxError):
    """Raised when a change set or analysis document cannot be loaded."""

    pass


class ConfigError(CommitCtxError):
    """Raised when the repository configuration holds invalid values."""

    pass
