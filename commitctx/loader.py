"""Loading of change set and analysis documents from disk.

Contains:
- load_document: Read a JSON or YAML file into a dict
- load_change_set: Read and validate a ChangeSet document
- load_analysis: Read an analysis document and resolve its paths against a ChangeSet

Analysis documents reference file changes by path:

    pattern: feature_addition
    complexity: 12
    key_insights: ["Adds token refresh"]
    categorized_changes:
      core_logic: [src/auth.py]
      tests: [tests/test_auth.py]
"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from commitctx.exceptions import ChangeSetLoadError
from commitctx.models import AnalysisResult, ChangeCategory, ChangeSet

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: Path) -> dict:
    """Read a JSON or YAML document.

    YAML is chosen by file suffix (.yaml/.yml); anything else is read as JSON.

    Args:
        path: The file to read.

    Returns:
        The parsed mapping.

    Raises:
        ChangeSetLoadError: If the file cannot be read or parsed, or does not
            hold a mapping.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ChangeSetLoadError(f"Cannot read {path}: {e}")

    try:
        if Path(path).suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ChangeSetLoadError(f"Failed to parse {path}.\nError: {e}")

    if not isinstance(data, dict):
        raise ChangeSetLoadError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def load_change_set(path: Path) -> ChangeSet:
    """Load and validate a change set document.

    Args:
        path: JSON or YAML file describing the change set.

    Returns:
        The validated ChangeSet.

    Raises:
        ChangeSetLoadError: If the file is unreadable or does not match the schema.
    """
    data = load_document(path)
    try:
        return ChangeSet.model_validate(data)
    except ValidationError as e:
        raise ChangeSetLoadError(
            f"Change set {path} does not match expected schema.\n"
            f"Error: {e}"
        )


def _parse_category(name: str, path: Path) -> ChangeCategory:
    """Parse a category name case-insensitively."""
    try:
        return ChangeCategory(str(name).lower())
    except ValueError:
        valid = ", ".join(category.value for category in ChangeCategory)
        raise ChangeSetLoadError(f"Unknown category '{name}' in {path}. Valid categories: {valid}")


def load_analysis(path: Path, change_set: ChangeSet) -> AnalysisResult:
    """Load an analysis document and attach it to the change set's file changes.

    Category members are given as paths (or mappings with a ``path`` key)
    and are resolved to the FileChange objects of ``change_set``, keeping
    the document's order.

    Args:
        path: JSON or YAML file describing the analysis.
        change_set: The change set the analysis refers to.

    Returns:
        The validated AnalysisResult.

    Raises:
        ChangeSetLoadError: If the file is invalid or references unknown paths.
    """
    data = load_document(path)
    raw_categories = data.get("categorized_changes") or {}
    if not isinstance(raw_categories, dict):
        raise ChangeSetLoadError(f"'categorized_changes' in {path} must be a mapping")

    categorized = {}
    for name, members in raw_categories.items():
        category = _parse_category(name, path)
        if members is not None and not isinstance(members, list):
            raise ChangeSetLoadError(
                f"Category '{name}' in {path} must list paths, got {type(members).__name__}"
            )
        resolved = []
        for member in members or []:
            member_path = member.get("path") if isinstance(member, dict) else member
            change = change_set.find_change(member_path)
            if change is None:
                raise ChangeSetLoadError(
                    f"Category '{name}' in {path} references unknown path: {member_path}"
                )
            resolved.append(change)
        categorized[category] = resolved

    try:
        return AnalysisResult.model_validate({**data, "categorized_changes": categorized})
    except ValidationError as e:
        raise ChangeSetLoadError(
            f"Analysis {path} does not match expected schema.\n"
            f"Error: {e}"
        )
