"""Assembly and rendering of the structured prompt document.

Contains:
- compose_document: Build the ordered document for one change set
- render_document: Serialize the document as pretty-printed JSON
"""

import json
from typing import Optional

from commitctx.logging import get_logger
from commitctx.models import AnalysisResult, ChangeSet
from commitctx.prompt.budget import CharBudget
from commitctx.prompt.categorize import (
    build_categorized_changes,
    build_changes_by_path,
    find_uncategorized_paths,
)
from commitctx.prompt.projection import (
    project_analysis,
    project_project,
    project_statistics,
)

logger = get_logger("prompt.document")


def compose_document(
    change_set: ChangeSet,
    analysis: Optional[AnalysisResult],
    budget: CharBudget,
) -> dict:
    """Build the structured document for a change set.

    Top-level keys always come in this order: analysis, project, statistics,
    categorized_changes (with analysis) or changes (without), metadata (only
    when the change set carries any).

    Args:
        change_set: The change set to describe.
        analysis: The analyzer result, or None.
        budget: The budget of the current build; consumed by diff admission.

    Returns:
        The document as an insertion-ordered dict.
    """
    document = {
        "analysis": project_analysis(analysis),
        "project": project_project(change_set.project),
        "statistics": project_statistics(change_set.statistics),
    }

    if analysis is not None:
        uncategorized = find_uncategorized_paths(change_set.changes, analysis)
        if uncategorized:
            logger.warning(
                "%d change(s) not assigned to any category and left out of the prompt: %s",
                len(uncategorized),
                ", ".join(uncategorized),
            )
        document["categorized_changes"] = build_categorized_changes(analysis, budget)
    else:
        document["changes"] = build_changes_by_path(change_set.changes, budget)

    if change_set.metadata:
        document["metadata"] = dict(change_set.metadata)

    return document


def render_document(document: dict) -> str:
    """Serialize the document as pretty-printed JSON."""
    return json.dumps(document, indent=2, ensure_ascii=False)
