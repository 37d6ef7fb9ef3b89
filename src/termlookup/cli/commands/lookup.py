"""CLI command for looking up a term.

Implements the 'termlookup TERM' command, which prints dictionary definitions
and a Wikipedia summary for a single term.
"""

import math
import sys

import click

from termlookup.config.settings import resolve_config
from termlookup.lib.errors import ConfigError, Source
from termlookup.lib.logging_config import get_logger, setup_logging
from termlookup.lib.report import render_outcome
from termlookup.services.lookup import lookup
from termlookup.services.sources import DictionarySource, EncyclopediaSource

logger = get_logger(__name__)

SOURCE_LABELS = {
    Source.DICTIONARY: "dictionary",
    Source.ENCYCLOPEDIA: "Wikipedia",
}


def _validate_term(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value.strip():
        raise click.BadParameter("term must not be empty")
    return value


def _validate_timeout(
    ctx: click.Context, param: click.Parameter, value: float | None
) -> float | None:
    if value is not None and not math.isfinite(value):
        raise click.BadParameter("timeout must be a finite number of seconds")
    return value


@click.command(name="termlookup")
@click.argument("term", callback=_validate_term)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    callback=_validate_timeout,
    help="Request timeout in seconds for each source (default: 10)",
)
@click.option(
    "--parallel",
    is_flag=True,
    help="Query both sources at the same time",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose debug logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress warnings (errors are still shown)",
)
def lookup_cmd(
    term: str,
    timeout: float | None,
    parallel: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Fetch dictionary definitions and a Wikipedia summary for TERM.

    Both sources are always queried. If one of them fails, the other
    source's section is still printed, the failure is reported on stderr
    and the exit code is 1.

    \b
    EXAMPLES:

        Look up a word:
            termlookup serendipity

        Look up a phrase:
            termlookup "black hole"
    """
    setup_logging(verbose=verbose, quiet=quiet)

    logger.info(
        f"Lookup command invoked: term={term!r}, timeout={timeout}, "
        f"parallel={parallel}"
    )

    try:
        config = resolve_config({"timeout": timeout})
    except ConfigError as e:
        logger.debug(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Invalid configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(2)

    try:
        with (
            DictionarySource(
                config.dictionary_url,
                timeout=config.timeout,
                user_agent=config.user_agent,
            ) as dictionary_source,
            EncyclopediaSource(
                config.encyclopedia_url,
                timeout=config.timeout,
                user_agent=config.user_agent,
            ) as encyclopedia_source,
        ):
            outcome = lookup(
                term, dictionary_source, encyclopedia_source, parallel=parallel
            )
    except KeyboardInterrupt:
        logger.info("Lookup interrupted by user (Ctrl+C)")
        sys.exit(130)

    report = render_outcome(outcome)
    if report:
        click.echo(report)

    for error in outcome.errors:
        click.secho(
            f"Error fetching {SOURCE_LABELS[error.source]}: {error.cause}",
            fg="red",
            err=True,
        )

    sys.exit(0 if outcome.ok else 1)
