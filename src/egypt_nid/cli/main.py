"""Main CLI entry point for egypt-nid.

This module provides the main Click command group for the egypt-nid CLI.
"""

from pathlib import Path
from typing import Optional

import click

from egypt_nid import __version__
from egypt_nid.cli.batch_commands import batch
from egypt_nid.cli.nid_commands import format_command, inspect_command, validate_command
from egypt_nid.config import load_config
from egypt_nid.logging_audit import configure_logging_from_config
from egypt_nid.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="egypt-nid")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii/--no-redact-pii",
    default=None,
    help="Mask national IDs in logs (overrides config file, on by default)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: Optional[bool],
) -> None:
    """egypt-nid - Parse and validate Egyptian national IDs.

    Decodes birth date, gender, governorate, region and generation from a
    14-digit national ID, and validates single IDs or whole CSV files.

    Common usage:

        # Show everything encoded in an ID
        egypt-nid inspect 30101010123458

        # Check several IDs at once
        egypt-nid validate 30101010123458 29912310212345

        # Validate a CSV file of IDs
        egypt-nid batch validate people.csv --column national_id

        # Enable verbose logging for debugging
        egypt-nid --verbose inspect 30101010123458

    Use --help with any command for more information.
    """
    # Ensure context object exists for subcommands
    ctx.ensure_object(dict)

    # Load configuration
    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    # Store CLI flags in context
    ctx.obj["verbose"] = verbose
    ctx.obj["log_file"] = log_file

    # CLI flags override the loaded logging section
    overrides: dict = {}
    if verbose:
        overrides["level"] = "DEBUG"
    if log_file:
        overrides["log_file"] = log_file
    if redact_pii is not None:
        overrides["redact_pii"] = redact_pii
    logging_config = config_obj.logging.model_copy(update=overrides)
    ctx.obj["redact_pii"] = logging_config.redact_pii

    configure_logging_from_config(logging_config)


# Register commands
cli.add_command(inspect_command)
cli.add_command(validate_command)
cli.add_command(format_command)
cli.add_command(batch)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Args:
        config_file: Path to configuration file to validate

    Example:
        egypt-nid config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)

        click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
        click.echo(f"\nConfiguration file: {config_file}")

        click.echo("\nValidation:")
        click.echo(f"  Validate checksum:      {config_obj.validation.validate_checksum}")
        click.echo(f"  ID column:              {config_obj.validation.id_column}")
        click.echo(f"  Warn on likely expired: {config_obj.validation.warn_on_likely_expired}")

        click.echo("\nLogging:")
        click.echo(f"  Level:       {config_obj.logging.level}")
        click.echo(f"  Log file:    {config_obj.logging.log_file}")
        click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")

    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)


cli.add_command(config)


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"egypt-nid version {__version__}")


if __name__ == "__main__":
    cli()
