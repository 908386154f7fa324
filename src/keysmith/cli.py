"""Command-line interface for KeySmith.

This module provides the CLI commands for generating and evaluating
passwords.
"""

import json
from typing import NoReturn

import click

from keysmith.application.services.password_service import get_password_service
from keysmith.core.config import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, get_settings
from keysmith.core.exceptions import PasswordGenerationError
from keysmith.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from keysmith.domain.entities.generation_config import GenerationMode
from keysmith.domain.entities.strength_result import EvaluationContext, StrengthResult


@click.group()
@click.version_option(version="0.1.0", prog_name="KeySmith")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides configuration)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """KeySmith - Constrained password generation and strength scoring.

    Passwords are written to stdout, logs to stderr.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    bind_correlation_id(new_correlation_id())
    ctx.call_on_close(clear_context)
    ctx.obj = settings


def _describe(strength: StrengthResult) -> str:
    return f"{strength.level.value} {strength.score}/100, {strength.entropy:.1f} bits"


def _emit(passwords: list[tuple[str, StrengthResult]], show_strength: bool, as_json: bool) -> None:
    if as_json:
        click.echo(
            json.dumps(
                [{"password": pw, "strength": s.to_dict()} for pw, s in passwords],
                ensure_ascii=False,
                indent=2,
            )
        )
        return
    for password, strength in passwords:
        if show_strength:
            click.echo(f"{password}\t[{_describe(strength)}]")
        else:
            click.echo(password)


def _generate(mode: GenerationMode, config_overrides: dict, count: int) -> list[tuple[str, StrengthResult]]:
    logger = get_logger(__name__)
    try:
        service = get_password_service()
        if mode is GenerationMode.RANDOM:
            config = service.default_random_config(**config_overrides)
        else:
            config = service.default_memorable_config(**config_overrides)
        outcomes = [service.generate(mode, config) for _ in range(count)]
    except PasswordGenerationError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error("Password generation failed via CLI", mode=mode.value, code=e.code)
        raise SystemExit(1)
    return [(outcome.password, outcome.strength) for outcome in outcomes]


@cli.group()
def generate() -> None:
    """Generate passwords."""


@generate.command("random")
@click.option(
    "--length",
    "-l",
    type=int,
    default=None,
    help=f"Password length, {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} (default from config)",
)
@click.option("--numbers/--no-numbers", default=None, help="Include digits")
@click.option("--symbols/--no-symbols", default=None, help="Include symbols")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="How many passwords")
@click.option("--show-strength", is_flag=True, default=False, help="Print the strength next to each password")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON")
def generate_random(
    length: int | None,
    numbers: bool | None,
    symbols: bool | None,
    count: int,
    show_strength: bool,
    as_json: bool,
) -> None:
    """Generate random passwords.

    Every password contains uppercase and lowercase letters plus the enabled
    digit and symbol classes, and avoids keyboard runs, repeated characters
    and common weak patterns.
    """
    passwords = _generate(
        GenerationMode.RANDOM,
        {"length": length, "include_numbers": numbers, "include_symbols": symbols},
        count,
    )
    _emit(passwords, show_strength, as_json)


@generate.command("memorable")
@click.option("--words", "-w", type=int, default=None, help="Number of words (default from config)")
@click.option("--separator", "-s", type=str, default=None, help="Separator between words")
@click.option("--capitalize/--no-capitalize", default=None, help="Capitalize the first letter of each word")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="How many passwords")
@click.option("--show-strength", is_flag=True, default=False, help="Print the strength next to each password")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON")
def generate_memorable(
    words: int | None,
    separator: str | None,
    capitalize: bool | None,
    count: int,
    show_strength: bool,
    as_json: bool,
) -> None:
    """Generate memorable passwords from distinct dictionary words."""
    passwords = _generate(
        GenerationMode.MEMORABLE,
        {"word_count": words, "separator": separator, "capitalize_first": capitalize},
        count,
    )
    _emit(passwords, show_strength, as_json)


@cli.command()
@click.argument("password", required=False)
@click.option("--username", "-u", type=str, default=None, help="Username the password should not contain")
@click.option("--birth-year", "-b", type=str, default=None, help="Birth year the password should not contain")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON")
def evaluate(password: str | None, username: str | None, birth_year: str | None, as_json: bool) -> None:
    """Evaluate the strength of PASSWORD.

    Prompts with hidden input when PASSWORD is omitted, so the password does
    not end up in shell history.
    """
    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)

    try:
        service = get_password_service()
    except PasswordGenerationError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    result = service.evaluate(
        password, EvaluationContext(username=username, birth_year=birth_year)
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    summary = result.to_dict()
    click.echo(f"Strength:    {_describe(result)}")
    if summary["advantages"]:
        click.echo(f"Advantages:  {', '.join(summary['advantages'])}")
    if summary["risks"]:
        click.echo(f"Risks:       {', '.join(summary['risks'])}")
    for suggestion in result.suggestions:
        click.echo(f"  - {suggestion}")


@cli.command()
@click.pass_obj
def info(settings) -> None:
    """Display KeySmith configuration."""
    click.echo(f"""
KeySmith v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:   {settings.environment}

Random Passwords:
  Length:        {settings.default_length}
  Numbers:       {settings.include_numbers}
  Symbols:       {settings.include_symbols}
  Max Attempts:  {settings.max_generation_attempts}

Memorable Passwords:
  Words:         {settings.default_word_count}
  Separator:     {settings.default_separator!r}
  Capitalize:    {settings.capitalize_first}
  Word List:     {settings.word_list_path or 'built-in'}

Logging:
  Level:         {settings.log_level}
  Format:        {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `keysmith` command is run
    or when using `python -m keysmith`.
    """
    cli()


if __name__ == "__main__":
    main()
