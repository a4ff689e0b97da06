"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path

import pytest

from commitctx.models import (
    AnalysisResult,
    ChangeCategory,
    ChangeKind,
    ChangePattern,
    ChangeSet,
    ChangeStatistics,
    ChangeType,
    FileChange,
    ProjectInfo,
)


def _make_change(path: str, diff_content: str = "", **kwargs) -> FileChange:
    """Build a FileChange with sensible defaults."""
    fields = {
        "path": path,
        "type": ChangeKind.MODIFIED,
        "language": "Python",
        "extension": "py",
        "lines_added": 1,
        "lines_deleted": 0,
        "summary": f"Update {path}",
        "diff_content": diff_content,
    }
    fields.update(kwargs)
    return FileChange(**fields)


def _make_change_set(changes: list[FileChange], metadata: dict = None) -> ChangeSet:
    """Build a ChangeSet around the given changes."""
    return ChangeSet(
        project=ProjectInfo(name="demo", branch="main", is_git_repository=True),
        statistics=ChangeStatistics(
            files_changed=len(changes),
            lines_added=sum(c.lines_added for c in changes),
            lines_deleted=sum(c.lines_deleted for c in changes),
            total_lines=sum(c.lines_added + c.lines_deleted for c in changes),
            primary_type=ChangeType.FEATURE,
            scope="auth",
            complexity=7,
            language_distribution={"Python": 1.0},
        ),
        changes=changes,
        metadata=metadata or {},
    )


@pytest.fixture(autouse=True)
def reset_commitctx_logger():
    """Undo configure_logging so caplog sees commitctx records in every test."""
    yield
    logger = logging.getLogger("commitctx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_change():
    """Factory fixture for FileChange objects."""
    return _make_change


@pytest.fixture
def make_change_set():
    """Factory fixture for ChangeSet objects."""
    return _make_change_set


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Sample diff text mixing tagged operation lines with noise."""
    return """@@ -1,5 +1,8 @@
[MODIFY]: def login(user):
 context line
[ADD]: def logout(user):

[DELETE]: legacy_login = None
+ raw added line
[MOVE]: helpers.py -> utils/helpers.py
"""


@pytest.fixture
def sample_changes(sample_diff):
    """Three file changes: source, test and docs."""
    return [
        _make_change("src/auth.py", sample_diff, type=ChangeKind.MODIFIED, summary="Add logout"),
        _make_change(
            "tests/test_auth.py",
            "[ADD]: def test_logout():",
            type=ChangeKind.ADDED,
            summary="Add logout test",
        ),
        _make_change(
            "README.md",
            "",
            type=ChangeKind.MODIFIED,
            language="Markdown",
            extension="md",
            summary="Document logout",
        ),
    ]


@pytest.fixture
def sample_change_set(sample_changes):
    """Change set built from sample_changes with metadata."""
    return _make_change_set(sample_changes, metadata={"author": "dev", "ticket": "AUTH-42"})


@pytest.fixture
def sample_analysis(sample_changes):
    """Analysis partitioning sample_changes, with one empty category."""
    source, test, docs = sample_changes
    return AnalysisResult(
        pattern=ChangePattern.FEATURE_ADDITION,
        complexity=12,
        key_insights=["Adds logout flow", "Covers logout with a test"],
        categorized_changes={
            ChangeCategory.CORE_LOGIC: [source],
            ChangeCategory.CONFIGURATION: [],
            ChangeCategory.TESTS: [test],
            ChangeCategory.DOCUMENTATION: [docs],
        },
    )
