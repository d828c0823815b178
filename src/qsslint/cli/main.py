"""qsslint CLI entry point."""

from __future__ import annotations

import logging

import click

from qsslint import __version__
from qsslint.config import LintConfig
from qsslint.engine import lint_paths
from qsslint.model.result import LintMode
from qsslint.report import exit_code, report

_ADVICE = (
    "NOTE: Avoid using Qt style sheets where a QStyle or QProxyStyle would do. "
    "Style sheets are often not flexible enough for complex styles, and you "
    "only find out when it is too late to rewrite them."
)


def _echo_err(line: str) -> None:
    click.echo(line, err=True)


@click.command(epilog=_ADVICE)
@click.version_option(version=__version__, prog_name="qsslint")
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-s", "--syntax-only", is_flag=True, help="Only validate syntax, not semantics.")
@click.option(
    "-e",
    "--verbose-error-message",
    "verbose",
    is_flag=True,
    help="Report errors with failing lexeme, position and context.",
)
@click.option(
    "-j",
    "--jobs",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of files to lint in parallel.",
)
@click.option("--debug/--no-debug", default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    syntax_only: bool,
    verbose: bool,
    jobs: int,
    debug: bool,
) -> None:
    """Qt stylesheet syntax verifier.

    Checks every FILES argument and exits with code 0 if all of them are
    valid, or code 1 if any of them is not.
    """
    if not files:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = LintConfig(
        mode=LintMode.SYNTAX_ONLY if syntax_only else LintMode.FULL,
        verbose=verbose,
        jobs=jobs,
    )
    results = lint_paths(list(files), config.mode, jobs=config.jobs)
    for result in results:
        report(result, config, _echo_err)
    ctx.exit(exit_code(results))
