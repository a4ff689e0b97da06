"""Prompt builder for commit message generation.

Contains:
- BuildMode: Structured (JSON document) or simple (plain text) prompt
- PromptBuilder: Builds prompts for change sets, optionally using an analysis
- build_prompt: One-shot convenience wrapper around PromptBuilder
- build_simple_prompt: One-shot simple prompt
"""

from enum import Enum
from typing import Optional

from commitctx.logging import get_logger
from commitctx.models import AnalysisResult, ChangeSet
from commitctx.prompt.budget import DEFAULT_MAX_CHARS, CharBudget
from commitctx.prompt.document import compose_document, render_document
from commitctx.prompt.projection import complexity_level
from commitctx.prompts import (
    BASELINE_PROMPT_TEMPLATE,
    INTELLIGENT_PROMPT_TEMPLATE,
    SIMPLE_ANALYSIS_LINE,
    SIMPLE_CHANGE_LINE,
    SIMPLE_CHANGES_HEADER,
    SIMPLE_PROMPT_FOOTER,
    SIMPLE_PROMPT_HEADER,
    SIMPLE_STATISTICS_LINE,
)

logger = get_logger("prompt.builder")


class BuildMode(Enum):
    """Available prompt build modes."""

    STRUCTURED = "structured"
    SIMPLE = "simple"


class PromptBuilder:
    """Builds the text sent to the model for one or more change sets.

    The template is fixed at construction: the intelligent template when an
    analysis is supplied, the baseline template otherwise. Each build call
    gets its own CharBudget, so builds never share diff accounting.
    """

    def __init__(
        self,
        analysis: Optional[AnalysisResult] = None,
        max_chars: int = DEFAULT_MAX_CHARS,
    ):
        if max_chars < 0:
            raise ValueError(f"max_chars must not be negative, got {max_chars}")
        self.analysis = analysis
        self.max_chars = max_chars
        self.template = (
            INTELLIGENT_PROMPT_TEMPLATE if analysis is not None else BASELINE_PROMPT_TEMPLATE
        )

    def build_document(self, change_set: ChangeSet) -> dict:
        """Build the structured document for a change set.

        Args:
            change_set: The change set to describe.

        Returns:
            The ordered document dict, with diffs admitted under this
            builder's character ceiling.
        """
        budget = CharBudget(max_chars=self.max_chars)
        document = compose_document(change_set, self.analysis, budget)
        logger.debug(
            "Built document for %d change(s): %d/%d diff chars used",
            len(change_set.changes),
            budget.used,
            budget.max_chars,
        )
        return document

    def build(self, change_set: ChangeSet) -> str:
        """Build the structured prompt for a change set.

        Args:
            change_set: The change set to describe.

        Returns:
            The selected template with the rendered JSON document embedded.
        """
        document = self.build_document(change_set)
        return self.template.format(document=render_document(document))

    def build_simple(self, change_set: ChangeSet) -> str:
        """Build a plain-text prompt listing change summaries.

        No diff content is included, so no budget applies.

        Args:
            change_set: The change set to describe.

        Returns:
            The simple prompt text.
        """
        stats = change_set.statistics
        sections = [SIMPLE_PROMPT_HEADER]

        if self.analysis is not None:
            sections.append(
                SIMPLE_ANALYSIS_LINE.format(
                    description=self.analysis.pattern.description,
                    level=complexity_level(self.analysis),
                )
            )

        sections.append(
            SIMPLE_STATISTICS_LINE.format(
                files_changed=stats.files_changed,
                lines_added=stats.lines_added,
                lines_deleted=stats.lines_deleted,
                change_type=stats.primary_type.code,
                scope=stats.scope,
            )
        )

        change_lines = [SIMPLE_CHANGES_HEADER]
        change_lines.extend(
            SIMPLE_CHANGE_LINE.format(summary=change.summary) for change in change_set.changes
        )
        sections.append("\n".join(change_lines))
        sections.append(SIMPLE_PROMPT_FOOTER)

        return "\n\n".join(sections)


def build_prompt(
    change_set: ChangeSet,
    analysis: Optional[AnalysisResult] = None,
    mode: BuildMode = BuildMode.STRUCTURED,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> str:
    """Build the prompt for a change set in the given mode.

    Args:
        change_set: The change set to describe.
        analysis: Optional analyzer result.
        mode: Structured JSON prompt or simple plain-text prompt.
        max_chars: Ceiling for verbatim diff characters (structured mode only).

    Returns:
        The prompt text.
    """
    builder = PromptBuilder(analysis=analysis, max_chars=max_chars)
    if mode == BuildMode.SIMPLE:
        return builder.build_simple(change_set)
    return builder.build(change_set)


def build_simple_prompt(
    change_set: ChangeSet,
    analysis: Optional[AnalysisResult] = None,
) -> str:
    """Build the simple plain-text prompt for a change set."""
    return PromptBuilder(analysis=analysis).build_simple(change_set)
