# cli.py
from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from shredder.ai import AIConversionError, DEFAULT_MODEL, convert_with_openai
from shredder.converter import convert
from shredder.languages import DEFAULT_LANGUAGE, Language
from shredder.ui.console import Console, set_console, get_console

LANGUAGE_CHOICES = [lang.value for lang in Language]


def count_lines(text: str) -> int:
    """Line count of stripped text (an empty document still counts as one line)."""
    return len(text.strip().split("\n"))


def read_workflow(source: str) -> str:
    """
    Read workflow YAML from a path, or from stdin when source is '-'.

    Raises:
        SystemExit: If the file cannot be read
    """
    console = get_console()

    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        console.print_error(
            "Workflow file not found",
            f"Could not find workflow file: {source}",
            suggestion="Pass a GitHub Actions workflow, e.g.:\n  shredder convert .github/workflows/ci.yml",
        )
        sys.exit(1)

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print_error(
            "Could not read workflow",
            f"Failed to read {source}",
            details=[str(e)],
        )
        sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """YAML Shredder: turn GitHub Actions workflows into Dagger code."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command(name="convert")
@click.argument("workflow", default="-")
@click.option(
    "--lang",
    "language",
    type=click.Choice(LANGUAGE_CHOICES, case_sensitive=False),
    default=DEFAULT_LANGUAGE.value,
    show_default=True,
    help="Target Dagger SDK language",
)
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False), help="Write code to a file instead of stdout")
@click.option("--stats/--no-stats", default=False, show_default=True, help="Print YAML vs generated line counts")
@click.option("--ai", is_flag=True, default=False, help="Use the OpenAI fallback instead of the built-in converter")
@click.option("--model", default=DEFAULT_MODEL, show_default=True, help="OpenAI model for --ai")
@click.pass_context
def convert_cmd(ctx, workflow, language, output, stats, ai, model):
    """Convert a workflow file (or stdin) to Dagger code."""
    console = get_console()
    target = Language.parse(language)

    text = read_workflow(workflow)
    console.print_debug(f"Read {len(text)} characters from {workflow}")

    if ai:
        try:
            code = convert_with_openai(text, target, os.environ.get("OPENAI_API_KEY"), model=model)
        except AIConversionError as e:
            console.print_error(
                "AI conversion failed",
                str(e),
                suggestion="Set OPENAI_API_KEY or drop --ai to use the built-in converter.",
            )
            if ctx.obj.get("debug", False):
                import traceback
                traceback.print_exc()
            sys.exit(1)
    else:
        result = convert(text, target)
        if not result.ok:
            console.print_error("Conversion failed", result.error or "Unknown error")
            sys.exit(1)
        code = result.code

    console.print_debug(f"Generated {count_lines(code)} line(s) of {target.value}")

    if output:
        Path(output).write_text(code if code.endswith("\n") else code + "\n", encoding="utf-8")
        console.print_info(f"Wrote {target.value} pipeline to {output}")
    else:
        console.print_code(code)

    if stats:
        console.print_stats(count_lines(text), count_lines(code))


@cli.command()
def languages():
    """List supported target languages."""
    console = get_console()
    console.print_languages([(lang.value, lang.docs_url) for lang in Language])


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=8000, type=int, show_default=True, help="Bind port")
@click.option("--reload", is_flag=True, default=False, help="Auto-reload on code changes")
@click.pass_context
def serve(ctx, host, port, reload):
    """Run the HTTP conversion service."""
    import uvicorn

    console = get_console()
    console.print_info(f"Serving on http://{host}:{port}")

    try:
        uvicorn.run("shredder.cloud.main:app", host=host, port=port, reload=reload)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
