"""Budgeted prompt building for commitctx.

This package turns a change set into the text sent to the model:
- budget: CharBudget, DEFAULT_MAX_CHARS
- projection: project_project, project_statistics, project_analysis,
              project_change, extract_diff_summary, complexity_level
- categorize: build_categorized_changes, build_changes_by_path,
              find_uncategorized_paths
- document: compose_document, render_document
- builder: BuildMode, PromptBuilder, build_prompt, build_simple_prompt
"""

# Budget
from commitctx.prompt.budget import (
    DEFAULT_MAX_CHARS,
    CharBudget,
)

# Projection
from commitctx.prompt.projection import (
    DIFF_OMITTED_MARKER,
    DIFF_SUMMARY_TAGS,
    complexity_level,
    extract_diff_summary,
    project_analysis,
    project_change,
    project_project,
    project_statistics,
)

# Categorization
from commitctx.prompt.categorize import (
    build_categorized_changes,
    build_changes_by_path,
    find_uncategorized_paths,
)

# Document
from commitctx.prompt.document import (
    compose_document,
    render_document,
)

# Builder
from commitctx.prompt.builder import (
    BuildMode,
    PromptBuilder,
    build_prompt,
    build_simple_prompt,
)


__all__ = [
    # Budget
    "DEFAULT_MAX_CHARS",
    "CharBudget",
    # Projection
    "DIFF_OMITTED_MARKER",
    "DIFF_SUMMARY_TAGS",
    "complexity_level",
    "extract_diff_summary",
    "project_analysis",
    "project_change",
    "project_project",
    "project_statistics",
    # Categorization
    "build_categorized_changes",
    "build_changes_by_path",
    "find_uncategorized_paths",
    # Document
    "compose_document",
    "render_document",
    # Builder
    "BuildMode",
    "PromptBuilder",
    "build_prompt",
    "build_simple_prompt",
]
