"""Projection of change set entities into flat dictionaries.

Contains:
- project_project: Project descriptor fields
- project_statistics: Aggregate statistics fields
- project_analysis: Analyzer result fields (empty without analysis)
- project_change: File change fields, gated by the diff admission policy
- extract_diff_summary: Keep only the tagged operation lines of a diff
- complexity_level: Map a complexity score to a label
"""

from typing import Optional

from commitctx.logging import get_logger
from commitctx.models import AnalysisResult, ChangeStatistics, FileChange, ProjectInfo
from commitctx.prompt.budget import CharBudget

logger = get_logger("prompt.projection")

# Line prefixes that denote line-level operations in a diff
DIFF_SUMMARY_TAGS = ("[ADD]:", "[MODIFY]:", "[DELETE]:", "[MOVE]:")

# Replaces the diff summary when the diff did not fit into the budget
DIFF_OMITTED_MARKER = "(Diff omitted due to size limit)"

# Upper bounds (inclusive) for each complexity label, checked in order
COMPLEXITY_LEVELS = [
    (5, "simple"),
    (15, "moderate"),
    (30, "complex"),
]
COMPLEXITY_LEVEL_MAX = "very complex"
COMPLEXITY_LEVEL_UNKNOWN = "unknown"


def complexity_level(analysis: Optional[AnalysisResult]) -> str:
    """Return the complexity label for an analysis result.

    Args:
        analysis: The analyzer result, or None.

    Returns:
        One of "simple", "moderate", "complex", "very complex", or
        "unknown" when there is no analysis.
    """
    if analysis is None:
        return COMPLEXITY_LEVEL_UNKNOWN

    for upper_bound, label in COMPLEXITY_LEVELS:
        if analysis.complexity <= upper_bound:
            return label
    return COMPLEXITY_LEVEL_MAX


def project_project(project: ProjectInfo) -> dict:
    return {
        "name": project.name,
        "branch": project.branch,
        "is_git_repository": project.is_git_repository,
    }


def project_statistics(stats: ChangeStatistics) -> dict:
    return {
        "files_changed": stats.files_changed,
        "lines_added": stats.lines_added,
        "lines_deleted": stats.lines_deleted,
        "total_lines": stats.total_lines,
        "change_type": stats.primary_type.code,
        "scope": stats.scope,
        "complexity": stats.complexity,
        "language_distribution": dict(stats.language_distribution),
    }


def project_analysis(analysis: Optional[AnalysisResult]) -> dict:
    """Project the analyzer result, or an empty dict if there is none."""
    if analysis is None:
        return {}

    return {
        "pattern": analysis.pattern.name,
        "pattern_description": analysis.pattern.description,
        "complexity": analysis.complexity,
        "complexity_level": complexity_level(analysis),
        "key_insights": list(analysis.key_insights),
    }


def extract_diff_summary(diff_content: str) -> str:
    """Extract the tagged operation lines from a diff.

    Hunk headers, context lines and blank lines are dropped; the remaining
    lines keep their original order.

    Args:
        diff_content: The raw diff text.

    Returns:
        The tagged lines joined by newlines, stripped.
    """
    kept = [line for line in diff_content.split("\n") if line.startswith(DIFF_SUMMARY_TAGS)]
    return "\n".join(kept).strip()


def project_change(change: FileChange, budget: CharBudget) -> dict:
    """Project a file change, admitting its diff if the budget allows.

    A diff is either admitted whole (``diff_summary`` + ``full_diff_content``)
    or dropped whole (omission marker + ``is_truncated``). Changes without
    diff text get none of these keys.

    Args:
        change: The file change to project.
        budget: The budget of the current build; consumed on admission.

    Returns:
        The projected change as a dict.
    """
    data = {
        "path": change.path,
        "type": change.type.name,
        "language": change.language,
        "extension": change.extension,
        "lines_added": change.lines_added,
        "lines_deleted": change.lines_deleted,
        "summary": change.summary,
    }

    diff_content = change.diff_content
    if not diff_content:
        return data

    if budget.try_admit(len(diff_content)):
        data["diff_summary"] = extract_diff_summary(diff_content)
        data["full_diff_content"] = diff_content
    else:
        logger.debug(
            "Omitting diff for %s (%d chars, %d remaining)",
            change.path,
            len(diff_content),
            budget.remaining,
        )
        data["diff_summary"] = DIFF_OMITTED_MARKER
        data["is_truncated"] = True

    return data
