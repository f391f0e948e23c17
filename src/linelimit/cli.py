import difflib
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import click

from linelimit.config import ConfigurationError, get_max_length, validate_max_length
from linelimit.constants import (
    DIFF_ANNOTATED_FMT,
    DIFF_ORIGINAL_FMT,
    FILE_ENCODING,
    HIDDEN_PREFIX,
    OPTION_MAX_LENGTH,
    VIOLATION_FMT,
)
from linelimit.mode import CHECK
from linelimit.rule import LineLengthLimit
from linelimit.tokens import Tokens

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Check that no line is longer than a maximum length.

    \b
    Examples:
        linelimit check src/
        linelimit check --max-length 100 --diff app.py
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _resolve_max_length(max_length: int | None) -> int:
    try:
        if max_length is None:
            return get_max_length()
        return validate_max_length(max_length)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), param_hint="--max-length") from exc


def iter_files(paths: Sequence[Path]) -> Iterator[Path]:
    """Yield files under paths, skipping hidden directories and files."""
    for path in paths:
        if path.is_file():
            yield path
            continue
        for child in sorted(path.rglob("*")):
            relative = child.relative_to(path)
            if any(part.startswith(HIDDEN_PREFIX) for part in relative.parts):
                continue
            if child.is_file():
                yield child


def _print_diff(path: Path, original: str, annotated: str) -> None:
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        annotated.splitlines(keepends=True),
        fromfile=DIFF_ORIGINAL_FMT.format(path=path),
        tofile=DIFF_ANNOTATED_FMT.format(path=path),
    )
    for line in diff:
        if line.startswith("+") and not line.startswith("+++"):
            click.secho(line, fg="green", nl=False)
        elif line.startswith("-") and not line.startswith("---"):
            click.secho(line, fg="red", nl=False)
        else:
            click.echo(line, nl=False)
        if not line.endswith("\n"):
            click.echo("")


@main.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--max-length",
    "-l",
    "max_length",
    type=int,
    default=None,
    help="Maximum line length (default: $LINELIMIT_MAX_LENGTH or 120).",
)
@click.option("--diff", is_flag=True, help="Show the annotated lines as a diff.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def check(
    paths: tuple[Path, ...], max_length: int | None, diff: bool, verbose: bool
) -> None:
    """Report lines longer than the maximum length.

    Files are never modified: with --diff the annotation a dry run would
    make is printed instead.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    rule = LineLengthLimit({OPTION_MAX_LENGTH: _resolve_max_length(max_length)})

    total = 0
    files_failed = 0
    for path in iter_files(paths):
        if not rule.supports(path):
            continue
        try:
            text = path.read_text(encoding=FILE_ENCODING)
        except UnicodeDecodeError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue

        tokens = Tokens.from_text(text)
        if not rule.is_candidate(tokens):
            logger.debug("%s: ok", path)
            continue

        found = rule.fix(path, tokens, CHECK)
        files_failed += 1
        total += len(found)
        for long_line in found:
            click.echo(
                VIOLATION_FMT.format(
                    path=path,
                    line=long_line.line_number,
                    length=long_line.length,
                    max_length=rule.max_length,
                )
            )
        if diff:
            _print_diff(path, text, tokens.code())

    if total:
        click.secho(
            f"\nFound {total} line(s) longer than {rule.max_length} characters "
            f"in {files_failed} file(s).",
            fg="red",
            bold=True,
        )
        raise SystemExit(1)

    click.secho(f"All lines within {rule.max_length} characters.", fg="green")


@main.command()
@click.option(
    "--max-length",
    "-l",
    "max_length",
    type=int,
    default=None,
    help="Maximum line length (default: $LINELIMIT_MAX_LENGTH or 120).",
)
def describe(max_length: int | None) -> None:
    """Show the rule's name and metadata."""
    rule = LineLengthLimit({OPTION_MAX_LENGTH: _resolve_max_length(max_length)})
    click.echo(f"Name:     {click.style(rule.name, fg='cyan', bold=True)}")
    click.echo(f"Summary:  {rule.summary}")
    click.echo(f"Priority: {rule.priority}")
    click.echo(f"Risky:    {'yes' if rule.is_risky() else 'no'}")
    click.echo(f"\n{rule.description}")


if __name__ == "__main__":
    main()
