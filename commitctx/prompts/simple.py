"""Plain-text prompt pieces for quick, low-cost generation.

No JSON document and no diff content: only change summaries and one
statistics line (plus one analysis line when available).
"""

SIMPLE_PROMPT_HEADER = "Generate a conventional commit message for these changes:"

SIMPLE_ANALYSIS_LINE = "Analysis: {description} (complexity: {level})"

SIMPLE_STATISTICS_LINE = (
    "Statistics: {files_changed} files, +{lines_added}/-{lines_deleted} lines, "
    "type: {change_type}, scope: {scope}"
)

SIMPLE_CHANGES_HEADER = "Changes:"

SIMPLE_CHANGE_LINE = "- {summary}"

SIMPLE_PROMPT_FOOTER = "Format: type(scope): description"
