"""Command line interface: ask the questions of a YAML or JSON file."""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from . import setup_logging
from .config import STYLE_CHOICES, ConfigError, Settings, load_settings
from .engine import ask_, check_questions
from .errors import NotInteractiveError, QuestionError, format_error, format_suggestion
from .loader import load_questions
from .terminal import Terminal

_logging = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130


def _render_answers(answers: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(answers, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(answers, indent=2, ensure_ascii=False) + "\n"


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.pass_context
def cli(ctx, debug):
    """Ask questions at the command line and print the answers."""
    ctx.ensure_object(dict)
    try:
        settings = load_settings()
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    ctx.obj["settings"] = settings
    ctx.obj["debug"] = debug or settings.debug
    setup_logging(ctx.obj["debug"])


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--style",
    type=click.Choice(STYLE_CHOICES),
    default=None,
    help="Force the fancy or plain style (default: ASK_STYLE or auto)",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format of the answers",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write answers to this file instead of stdout",
)
@click.pass_context
def run(ctx, file: Path, style: str | None, fmt: str, output: Path | None):
    """Ask the questions in FILE and print the answers."""
    settings: Settings = ctx.obj["settings"]
    if style is not None:
        settings = Settings(style=style, debug=settings.debug)

    try:
        qs = load_questions(file)
        answers = ask_(qs, terminal=Terminal(), settings=settings)
    except NotInteractiveError as e:
        click.echo(format_suggestion(str(e), "run 'ask' from an interactive terminal"), err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (ConfigError, QuestionError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (KeyboardInterrupt, EOFError, click.Abort):
        click.echo("\nAborted.", err=True)
        sys.exit(EXIT_INTERRUPTED)

    rendered = _render_answers(answers, fmt)
    if output is not None:
        output.write_text(rendered, encoding="utf-8")
        _logging.debug(f"Wrote {len(answers)} answers to {output}")
    else:
        click.echo(rendered, nl=False)


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
def check(file: Path):
    """Validate the questions in FILE without asking them."""
    try:
        qs = load_questions(file)
        check_questions(qs)
    except (ConfigError, QuestionError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    for spec in qs:
        condition = " (conditional)" if spec.when is not None else ""
        click.echo(f"✅ {spec.name}: {spec.type}{condition}")
    click.echo(f"\n{len(qs)} question(s) OK.")


def main():
    cli()


if __name__ == "__main__":
    main()
