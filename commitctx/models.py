"""Data models for commitctx.

Contains:
- ChangeKind: How a single file was touched (added, modified, ...)
- ChangeType: Primary conventional change-type code of a change set
- ChangePattern: Change pattern detected by a semantic analyzer
- ChangeCategory: Semantic category an analyzer assigns to a file change
- ProjectInfo: Project descriptor
- FileChange: A single file change with optional raw diff text
- ChangeStatistics: Aggregate statistics of a change set
- AnalysisResult: Optional result of a semantic analyzer
- ChangeSet: The complete input handed to the prompt builder

All models are frozen: they are produced once by an external collaborator
and only read here. Null collections are normalized to empty ones so a
build never fails on them.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ChangeKind(Enum):
    """How a file was touched by the change set."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    MOVED = "moved"
    RENAMED = "renamed"
    COPIED = "copied"
    UNKNOWN = "unknown"


class ChangeType(Enum):
    """Primary change type of a change set, keyed by its conventional commit code."""

    FEATURE = "feat"
    FIX = "fix"
    DOCS = "docs"
    REFACTOR = "refactor"
    PERFORMANCE = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    STYLE = "style"
    REVERT = "revert"

    @property
    def code(self) -> str:
        """Short conventional commit code (e.g. ``feat``)."""
        return self.value


class ChangePattern(Enum):
    """Change patterns an analyzer can detect."""

    FEATURE_ADDITION = "feature_addition"
    BUG_FIX = "bug_fix"
    REFACTORING = "refactoring"
    DOCUMENTATION = "documentation"
    TESTING = "testing"
    CONFIGURATION = "configuration"
    DEPENDENCY_UPDATE = "dependency_update"
    STYLE_CHANGE = "style_change"
    PERFORMANCE = "performance"
    MIXED = "mixed"

    @property
    def description(self) -> str:
        """Human readable description of the pattern."""
        return PATTERN_DESCRIPTIONS[self]


PATTERN_DESCRIPTIONS = {
    ChangePattern.FEATURE_ADDITION: "New feature implementation",
    ChangePattern.BUG_FIX: "Bug fix or behavior correction",
    ChangePattern.REFACTORING: "Code restructuring without behavior change",
    ChangePattern.DOCUMENTATION: "Documentation update",
    ChangePattern.TESTING: "Test addition or update",
    ChangePattern.CONFIGURATION: "Configuration change",
    ChangePattern.DEPENDENCY_UPDATE: "Dependency update",
    ChangePattern.STYLE_CHANGE: "Formatting or style change",
    ChangePattern.PERFORMANCE: "Performance improvement",
    ChangePattern.MIXED: "Mixed changes across several concerns",
}


class ChangeCategory(Enum):
    """Semantic categories a file change can be grouped under."""

    CORE_LOGIC = "core_logic"
    API = "api"
    UI = "ui"
    TESTS = "tests"
    DOCUMENTATION = "documentation"
    CONFIGURATION = "configuration"
    BUILD = "build"
    DEPENDENCIES = "dependencies"
    RESOURCES = "resources"
    OTHER = "other"


class ProjectInfo(BaseModel):
    """Project descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    branch: str = ""
    is_git_repository: bool = True


class FileChange(BaseModel):
    """A single file change.

    Attributes:
        path: File path, unique within the change set.
        type: How the file was touched.
        language: Language tag (e.g. "Python").
        extension: File extension without the dot.
        lines_added: Number of added lines.
        lines_deleted: Number of deleted lines.
        summary: One-line human summary of the change.
        diff_content: Raw diff text, possibly empty or very large.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    type: ChangeKind = ChangeKind.MODIFIED
    language: str = ""
    extension: str = ""
    lines_added: int = 0
    lines_deleted: int = 0
    summary: str = ""
    diff_content: str = ""

    @field_validator("diff_content", "summary", "language", "extension", mode="before")
    @classmethod
    def none_to_empty_string(cls, v):
        """Treat missing text fields as empty."""
        if v is None:
            return ""
        return v


class ChangeStatistics(BaseModel):
    """Aggregate statistics of a change set."""

    model_config = ConfigDict(frozen=True)

    files_changed: int = 0
    lines_added: int = 0
    lines_deleted: int = 0
    total_lines: int = 0
    primary_type: ChangeType = ChangeType.CHORE
    scope: str = ""
    complexity: int = 0
    language_distribution: dict[str, float] = {}

    @field_validator("language_distribution", mode="before")
    @classmethod
    def ensure_distribution_dict(cls, v):
        """Ensure language_distribution is a dict."""
        if v is None:
            return {}
        return v


class AnalysisResult(BaseModel):
    """Result of a semantic analysis of the change set.

    ``categorized_changes`` partitions the file changes by category. Its
    insertion order is the order categories appear in the prompt.
    """

    model_config = ConfigDict(frozen=True)

    pattern: ChangePattern
    complexity: int = 0
    key_insights: list[str] = []
    categorized_changes: dict[ChangeCategory, list[FileChange]] = {}

    @field_validator("key_insights", mode="before")
    @classmethod
    def ensure_insights_list(cls, v):
        """Ensure key_insights is a list."""
        if v is None:
            return []
        return v

    @field_validator("categorized_changes", mode="before")
    @classmethod
    def ensure_categories_dict(cls, v):
        """Ensure categorized_changes is a dict."""
        if v is None:
            return {}
        return v


class ChangeSet(BaseModel):
    """Complete description of the change set to build a prompt for."""

    model_config = ConfigDict(frozen=True)

    project: ProjectInfo
    statistics: ChangeStatistics = ChangeStatistics()
    changes: list[FileChange] = []
    metadata: dict[str, str] = {}

    @field_validator("changes", mode="before")
    @classmethod
    def ensure_changes_list(cls, v):
        """Ensure changes is a list."""
        if v is None:
            return []
        return v

    @field_validator("metadata", mode="before")
    @classmethod
    def ensure_metadata_dict(cls, v):
        """Ensure metadata is a dict."""
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def check_unique_paths(self):
        """Reject change sets that list the same path more than once."""
        seen = set()
        duplicates = []
        for change in self.changes:
            if change.path in seen and change.path not in duplicates:
                duplicates.append(change.path)
            seen.add(change.path)
        if duplicates:
            raise ValueError(f"Duplicate change paths: {', '.join(duplicates)}")
        return self

    def find_change(self, path: str) -> Optional[FileChange]:
        """Return the change with the given path, or None."""
        for change in self.changes:
            if change.path == path:
                return change
        return None
