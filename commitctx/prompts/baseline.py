"""Prompt template used when no semantic analysis is available."""

BASELINE_PROMPT_TEMPLATE = """Analyze this structured commit data and generate a conventional commit message:

{document}

Requirements:
1. Use conventional commit format: type(scope): description
2. Choose appropriate type based on change_type and file analysis
3. Use scope from statistics or infer from file paths
4. IMPORTANT: Use full_diff_content to see actual code changes and understand developer intent
5. Write clear, concise description focusing on WHAT changed
6. Keep description under 50 characters if possible
7. Use present tense ("add" not "added")

Focus on the change statistics, file summaries, and full_diff_content to determine the appropriate type and scope."""
