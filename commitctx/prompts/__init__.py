"""Prompt templates for commit message generation.

This package contains the instruction templates wrapped around a change set:
- intelligent: Structured document with analysis and categorized changes
- baseline: Structured document without analysis
- simple: Plain-text listing without the structured document
"""

from commitctx.prompts.intelligent import INTELLIGENT_PROMPT_TEMPLATE
from commitctx.prompts.baseline import BASELINE_PROMPT_TEMPLATE
from commitctx.prompts.simple import (
    SIMPLE_ANALYSIS_LINE,
    SIMPLE_CHANGE_LINE,
    SIMPLE_CHANGES_HEADER,
    SIMPLE_PROMPT_FOOTER,
    SIMPLE_PROMPT_HEADER,
    SIMPLE_STATISTICS_LINE,
)


__all__ = [
    # Structured templates
    "INTELLIGENT_PROMPT_TEMPLATE",
    "BASELINE_PROMPT_TEMPLATE",
    # Simple template pieces
    "SIMPLE_PROMPT_HEADER",
    "SIMPLE_ANALYSIS_LINE",
    "SIMPLE_STATISTICS_LINE",
    "SIMPLE_CHANGES_HEADER",
    "SIMPLE_CHANGE_LINE",
    "SIMPLE_PROMPT_FOOTER",
]
