"""CLI entry point for commitctx.

Builds commit message prompts from change set documents produced by other
tools. Nothing here diffs files or calls a model.
"""

from pathlib import Path
from typing import Optional

import typer

from commitctx.config import (
    DEFAULT_CONFIG,
    get_build_mode,
    get_config_file,
    get_max_chars,
    save_config,
)
from commitctx.exceptions import ChangeSetLoadError, ConfigError
from commitctx.loader import load_analysis, load_change_set
from commitctx.logging import configure_logging
from commitctx.prompt import BuildMode, PromptBuilder, render_document

app = typer.Typer(
    name="commitctx",
    help="commitctx: budgeted commit context builder for LLM commit messages",
    add_completion=False,
)


@app.command("build")
def build_command(
    change_set_file: Path = typer.Argument(
        ...,
        help="JSON or YAML file describing the change set",
    ),
    analysis_file: Optional[Path] = typer.Option(
        None,
        "--analysis",
        "-a",
        help="JSON or YAML file with the semantic analysis of the change set",
    ),
    simple: bool = typer.Option(
        False,
        "--simple",
        help="Build the plain-text prompt (no JSON document, no diffs)",
    ),
    max_chars: Optional[int] = typer.Option(
        None,
        "--max-chars",
        min=0,
        help="Maximum characters of verbatim diff content (default from config)",
    ),
    show_json: bool = typer.Option(
        False,
        "--show-json",
        help="Print only the structured document instead of the full prompt",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log budget decisions to stderr",
    ),
) -> None:
    """Build the prompt for a change set and print it to stdout."""
    configure_logging(verbose=verbose)
    repo_root = Path.cwd()

    try:
        if max_chars is None:
            max_chars = get_max_chars(repo_root)
        mode = BuildMode.SIMPLE if simple else get_build_mode(repo_root)

        change_set = load_change_set(change_set_file)
        analysis = load_analysis(analysis_file, change_set) if analysis_file else None
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except ChangeSetLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    builder = PromptBuilder(analysis=analysis, max_chars=max_chars)

    if show_json:
        if mode == BuildMode.SIMPLE:
            typer.echo("--show-json cannot be combined with simple mode.", err=True)
            raise typer.Exit(1)
        typer.echo(render_document(builder.build_document(change_set)))
        return

    if mode == BuildMode.SIMPLE:
        typer.echo(builder.build_simple(change_set))
    else:
        typer.echo(builder.build(change_set))


@app.command("init")
def init_command(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration file",
    ),
) -> None:
    """Write the default .commitctx/config.yaml in the current directory."""
    repo_root = Path.cwd()
    config_file = get_config_file(repo_root)

    if config_file.exists() and not force:
        typer.echo(f"Configuration already exists at {config_file}. Use --force to overwrite.", err=True)
        raise typer.Exit(1)

    save_config(repo_root, DEFAULT_CONFIG.copy())
    typer.echo(f"✓ Configuration saved to {config_file}")
    typer.echo(f"  max_chars: {DEFAULT_CONFIG['max_chars']}")
    typer.echo(f"  mode: {DEFAULT_CONFIG['mode']}")
