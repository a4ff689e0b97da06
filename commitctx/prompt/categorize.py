"""Grouping of projected file changes.

Contains:
- build_categorized_changes: Group projected changes by analyzer category
- build_changes_by_path: Key projected changes by path (no analysis)
- find_uncategorized_paths: Paths of the change set no category mentions
"""

from commitctx.models import AnalysisResult, FileChange
from commitctx.prompt.budget import CharBudget
from commitctx.prompt.projection import project_change


def build_changes_by_path(changes: list[FileChange], budget: CharBudget) -> dict:
    """Project every change in input order and key the result by path.

    Budget is consumed in input order; the returned mapping is sorted by
    path.

    Args:
        changes: The file changes of the change set.
        budget: The budget of the current build.

    Returns:
        Mapping of path to projected change, sorted by path.
    """
    by_path = {}
    for change in changes:
        by_path[change.path] = project_change(change, budget)
    return {path: by_path[path] for path in sorted(by_path)}


def build_categorized_changes(analysis: AnalysisResult, budget: CharBudget) -> dict:
    """Project changes grouped by the analyzer's categories.

    Categories keep the analyzer's order and changes keep their order
    within a category. Empty categories are left out. Budget is consumed in
    that same order, so earlier categories get their diffs admitted first.

    Args:
        analysis: The analyzer result holding the category partition.
        budget: The budget of the current build.

    Returns:
        Mapping of lower-cased category name to a list of projected changes.
    """
    categorized = {}
    for category, members in analysis.categorized_changes.items():
        if not members:
            continue
        categorized[category.name.lower()] = [project_change(change, budget) for change in members]
    return categorized


def find_uncategorized_paths(changes: list[FileChange], analysis: AnalysisResult) -> list[str]:
    """Return paths of ``changes`` that are not in any analyzer category.

    Args:
        changes: The file changes of the change set.
        analysis: The analyzer result.

    Returns:
        Paths in input order.
    """
    categorized_paths = {
        change.path
        for members in analysis.categorized_changes.values()
        for change in members
    }
    return [change.path for change in changes if change.path not in categorized_paths]
