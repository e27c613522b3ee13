# cli.py - Command line interface for Narrator
"""
Narrator CLI - Normalize course lessons for narration and slides

COMMANDS:
    narrator normalize FILE [--mode M] [--preserve-code] [--output F]
                                             Print (or write) cleaned lesson text
    narrator list [--module DIR] [--json]    List lessons with token estimates
    narrator components FILE                 Visual components a deck will need
    narrator info                            Show resolved configuration
    narrator init [--force]                  Write a narrator.yaml template
    narrator version                         Show version information

EXAMPLES:
    # Narration text for a podcast script
    narrator normalize website/docs/intro.mdx

    # Presentation text, keeping code samples verbatim
    narrator normalize website/docs/intro.mdx --mode presentation --preserve-code

    # Only lessons in one module, as JSON
    narrator list --module fundamentals --json
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from narrator import __version__
from narrator.config_utils import CONFIG_FILENAME, NarratorConfig, create_config_template, get_config
from narrator.discovery import (
    document_title,
    estimate_token_count,
    extract_visual_components,
    filter_files,
    find_markdown_files,
)
from narrator.errors import NarratorError, not_a_lesson_error
from narrator.icons import LEVEL_ICONS, SUCCESS, VISUAL, WARNING, icons
from narrator.markdown_parser import normalize
from narrator.models import RenderMode


# ============================================================================
# Logging
# ============================================================================

# Message-only; no per-line timestamps
LOG_FORMAT = "%(message)s"


class IconLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        icon = LEVEL_ICONS.get(record.levelno, icons.SUCCESS)
        base = super().format(record)
        return f"{icon} {base}"


def setup_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity >= 2 else logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(IconLogFormatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


# ============================================================================
# Context
# ============================================================================

class NarratorContext:
    """Shared context for CLI commands"""

    def __init__(self):
        self.project_root = Path.cwd()
        self._config: Optional[NarratorConfig] = None

    @property
    def config(self) -> NarratorConfig:
        # Loaded on first use so `init --force` still works with a broken narrator.yaml
        if self._config is None:
            try:
                self._config = get_config(self.project_root)
            except NarratorError as e:
                raise click.ClickException(str(e))
        return self._config

    def normalize(self, path: Path, mode: RenderMode, preserve_code: bool = False) -> str:
        if path.suffix.lower() not in {".md", ".mdx"}:
            raise click.ClickException(str(not_a_lesson_error(path)))
        try:
            return normalize(path, mode, preserve_code, self.config)
        except OSError as e:
            raise click.ClickException(f"Could not read {path}: {e}")
        except NarratorError as e:
            raise click.ClickException(str(e))


def _resolve_mode(ctx: NarratorContext, mode: Optional[str]) -> RenderMode:
    return RenderMode.coerce(mode) if mode else ctx.config.default_mode


# ============================================================================
# Click Group Setup
# ============================================================================

@click.group()
@click.option('--verbose', '-v', count=True, help='More output (-vv for debug tracing)')
@click.pass_context
def cli(ctx, verbose: int):
    """
    Narrator - Course lesson normalization

    Turns MDX lessons into plain text for podcast and presentation scripts.
    """
    setup_logging(verbose)
    ctx.obj = NarratorContext()


# ============================================================================
# Normalization
# ============================================================================

@cli.command('normalize')
@click.argument('file', type=click.Path(path_type=Path))
@click.option('--mode', type=click.Choice([m.value for m in RenderMode]),
              help='Which marked regions to keep (default: from config)')
@click.option('--preserve-code', is_flag=True, help='Keep fenced code blocks verbatim')
@click.option('--output', '-o', type=click.Path(path_type=Path), help='Write to a file instead of stdout')
@click.pass_obj
def normalize_command(ctx: NarratorContext, file: Path, mode: Optional[str], preserve_code: bool,
                      output: Optional[Path]):
    """
    Print cleaned lesson text

    Examples:
        narrator normalize lesson.mdx
        narrator normalize lesson.mdx --mode presentation --preserve-code
        narrator normalize lesson.mdx -o lesson.txt
    """
    text = ctx.normalize(file, _resolve_mode(ctx, mode), preserve_code)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"{SUCCESS} Wrote {output} (~{estimate_token_count(text)} tokens)", err=True)
    else:
        click.echo(text)


@cli.command('list')
@click.option('--module', help='Only lessons under this docs sub-directory')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_obj
def list_lessons(ctx: NarratorContext, module: Optional[str], as_json: bool):
    """
    List lessons in the docs directory

    Examples:
        narrator list
        narrator list --module fundamentals
        narrator list --json
    """
    docs_path = ctx.config.docs_path
    if not docs_path.is_dir():
        raise click.ClickException(f"Docs directory not found: {docs_path}")

    files = filter_files(find_markdown_files(docs_path, ctx.config.exclude), docs_path, module=module)

    items = []
    for path in files:
        try:
            title = document_title(path)
        except NarratorError as e:
            raise click.ClickException(str(e)) from e
        text = ctx.normalize(path, ctx.config.default_mode)
        items.append({
            "title": title,
            "path": str(path.relative_to(docs_path)),
            "tokens": estimate_token_count(text),
        })

    if as_json:
        click.echo(json.dumps(items, indent=2))
        return

    if not items:
        click.echo("No lessons found.")
        return

    click.echo(f"\n{icons.LESSON} LESSONS ({len(items)}):")
    for item in items:
        click.echo(f"  {item['title']}")
        click.echo(f"     {item['path']}  ~{item['tokens']} tokens")


@cli.command()
@click.argument('file', type=click.Path(path_type=Path))
@click.pass_obj
def components(ctx: NarratorContext, file: Path):
    """
    List visual components a presentation of FILE will need
    """
    text = ctx.normalize(file, RenderMode.PRESENTATION)
    names = extract_visual_components(text)

    if not names:
        click.echo("No visual components.")
        return
    for name in names:
        click.echo(f"{VISUAL} {name}")


# ============================================================================
# Configuration
# ============================================================================

@cli.command()
@click.pass_obj
def info(ctx: NarratorContext):
    """Show resolved configuration and where each value came from"""
    config = ctx.config
    settings = [
        "project_root", "website_dir", "site_alias", "docs_dir", "exclude",
        "visual_marker", "shared_prompt_marker", "immediate_window",
        "context_window", "default_mode",
    ]

    click.echo("\nNarrator Configuration")
    click.echo("=" * 40)
    for name in settings:
        value = getattr(config, name)
        if isinstance(value, RenderMode):
            value = value.value
        source = config._sources.get(name, "default")
        click.echo(f"  {name}: {value}  [{source}]")

    issues = config.validate()
    if issues:
        click.echo()
        for issue in issues:
            click.echo(f"{WARNING} {issue}")


@cli.command()
@click.option('--force', is_flag=True, help='Overwrite an existing narrator.yaml')
@click.pass_obj
def init(ctx: NarratorContext, force: bool):
    """Write a narrator.yaml template to the current directory"""
    target = ctx.project_root / CONFIG_FILENAME
    if target.exists() and not force:
        click.echo(f"[!] {CONFIG_FILENAME} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    target.write_text(create_config_template(), encoding="utf-8")
    click.echo(f"{SUCCESS} Created {CONFIG_FILENAME}")


# ============================================================================
# Version
# ============================================================================

@cli.command()
def version():
    """Show Narrator version"""
    click.echo(f"Narrator CLI v{__version__}")
    click.echo("Lesson normalization for podcast and presentation scripts")


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == '__main__':
    cli()
