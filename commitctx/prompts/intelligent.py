"""Prompt template used when a semantic analysis of the change set is available.

The document carries an analysis section and changes grouped under
categorized_changes.
"""

INTELLIGENT_PROMPT_TEMPLATE = """Analyze this intelligently structured commit data and generate a conventional commit message:

{document}

Enhanced Requirements:
1. Use conventional commit format: type(scope): description
2. Leverage the analysis.pattern and complexity_level for better type selection
3. Use categorized_changes to understand the change structure
4. Consider key_insights for important context
5. IMPORTANT: Use full_diff_content to see actual code changes and understand developer intent
6. Write clear, concise description focusing on WHAT changed
7. Keep description under 50 characters if possible
8. Use present tense ("add" not "added")

The analysis section provides intelligent insights and full_diff_content shows actual code changes - use both to generate more accurate commit messages."""
