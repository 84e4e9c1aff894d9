"""Command-line interface for blockutils.

This module provides CLI commands for generating random strings and
hexadecimal tokens from the shell.
"""

from typing import Callable, NoReturn

import click

from blockutils.core.config import Settings, get_settings
from blockutils.core.exceptions import EntropySourceError, InvalidInputError
from blockutils.core.logging import LoggingContext, configure_logging, get_logger
from blockutils.domain.services import CHARSETS, Randomness, Token


@click.group()
@click.version_option(version="0.1.0", prog_name="blockutils")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Set log level (overrides BLOCKUTILS_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """blockutils - Cryptographically secure random strings and tokens."""
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level.upper()})

    configure_logging(settings)
    ctx.obj = settings


def _generate(
    settings: Settings, command: str, count: int, produce: Callable[[], str]
) -> None:
    """Run a generator count times and echo each result on its own line."""
    logger = get_logger(__name__)

    with LoggingContext(command=command):
        try:
            values = [produce() for _ in range(count)]
        except InvalidInputError as e:
            raise click.UsageError(e.message) from e
        except EntropySourceError as e:
            logger.error("Generation aborted", error=e.message)
            click.echo(f"Error: {e.message}", err=True)
            raise SystemExit(1)

        logger.info("Values generated", count=count, environment=settings.environment)

    for value in values:
        click.echo(value)


@cli.command()
@click.option(
    "--length",
    "-l",
    type=int,
    default=None,
    help="Number of characters (defaults to BLOCKUTILS_DEFAULT_STRING_LENGTH)",
)
@click.option(
    "--charset",
    "-c",
    "charset_name",
    type=click.Choice(sorted(CHARSETS)),
    default=None,
    help="Named character set (defaults to BLOCKUTILS_DEFAULT_CHARSET)",
)
@click.option(
    "--chars",
    type=str,
    default=None,
    help="Custom character set, single-byte characters only",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of strings to generate",
)
@click.pass_obj
def string(
    settings: Settings,
    length: int | None,
    charset_name: str | None,
    chars: str | None,
    count: int,
) -> None:
    """Generate random strings from a character set."""
    if charset_name is not None and chars is not None:
        raise click.UsageError("--charset and --chars are mutually exclusive")

    bind_length = settings.default_string_length if length is None else length
    charset = chars if chars is not None else CHARSETS[charset_name or settings.default_charset]

    _generate(
        settings,
        "string",
        count,
        lambda: Randomness.generate_string(bind_length, charset),
    )


@cli.command()
@click.option(
    "--length",
    "-l",
    type=int,
    default=None,
    help="Number of hex characters (defaults to BLOCKUTILS_DEFAULT_TOKEN_LENGTH)",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of tokens to generate",
)
@click.pass_obj
def token(settings: Settings, length: int | None, count: int) -> None:
    """Generate lowercase hexadecimal tokens."""
    bind_length = settings.default_token_length if length is None else length

    _generate(settings, "token", count, lambda: Token.generate(bind_length))


@cli.command()
@click.pass_obj
def info(settings: Settings) -> None:
    """Display blockutils configuration and available character sets."""
    click.echo(f"""
{settings.app_name} v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:    {settings.environment}

Defaults:
  String Length:  {settings.default_string_length}
  Token Length:   {settings.default_token_length}
  Charset:        {settings.default_charset}

Logging:
  Level:          {settings.log_level}
  Format:         {settings.log_format}
""")
    click.echo("Character sets:")
    for name in sorted(CHARSETS):
        click.echo(f"  {name:<14}{CHARSETS[name]}")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `blockutils` command is run
    or when using `python -m blockutils`.
    """
    cli()


if __name__ == "__main__":
    main()
