"""Batch CLI commands for egypt-nid.

This module provides CLI commands for validating CSV files of national IDs
and exporting the rows that fail.
"""

import json as json_lib
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from egypt_nid.batch import (
    export_invalid_rows,
    load_national_ids_csv,
    validate_national_ids,
)
from egypt_nid.cli.nid_commands import get_context_config
from egypt_nid.logging_audit import suppress_console_logging
from egypt_nid.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


@click.group()
def batch() -> None:
    """CSV batch validation commands."""
    pass


@batch.command("validate")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--column",
    default=None,
    help="Column holding national IDs (default: from config, 'national_id')",
)
@click.option(
    "--validate-checksum",
    is_flag=True,
    help="Treat check digit mismatches as errors",
)
@click.option(
    "--warn-checksum",
    is_flag=True,
    help="Warn about unconfirmed check digits when not enforcing them",
)
@click.option(
    "--export-errors",
    type=click.Path(path_type=Path),
    help="Export invalid rows to CSV file",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def validate_batch_command(
    ctx: click.Context,
    file: Path,
    column: Optional[str],
    validate_checksum: bool,
    warn_checksum: bool,
    export_errors: Optional[Path],
    json_output: bool,
) -> None:
    """Validate every national ID in a CSV file.

    Performs comprehensive validation including:
    - Format, birth date and governorate checks on every row
    - Check digit enforcement (--validate-checksum)
    - Batch validation (missing and duplicate IDs)
    - Likely-expired card warnings

    Exits with code 0 for success (warnings are OK), code 1 for validation errors.

    Examples:

        # Basic validation with color-coded output
        egypt-nid batch validate people.csv

        # IDs stored in a differently named column
        egypt-nid batch validate people.csv --column nid

        # Validate and export invalid rows to a separate file
        egypt-nid batch validate people.csv --export-errors invalid_rows.csv

        # Output validation results in JSON format for automation
        egypt-nid batch validate people.csv --json
    """
    config = get_context_config(ctx)
    id_column = column or config.validation.id_column
    enforce_checksum = validate_checksum or config.validation.validate_checksum

    with suppress_console_logging(json_output):
        try:
            logger.info(f"Validating CSV file: {file}")
            df = load_national_ids_csv(file, column=id_column)
            if df.empty:
                click.secho("CSV file has no data rows", fg="yellow")
                sys.exit(0)

            result = validate_national_ids(
                df,
                column=id_column,
                validate_checksum=enforce_checksum,
                warn_on_likely_expired=config.validation.warn_on_likely_expired,
                warn_on_checksum_mismatch=warn_checksum,
            )

            if result.has_errors:
                if json_output:
                    click.echo(json_lib.dumps(result.to_dict(), indent=2))
                else:
                    click.secho(result.format_report(), fg="red", err=True)

                if export_errors:
                    export_invalid_rows(df, result, export_errors)
                    if not json_output:
                        click.echo(f"\nInvalid rows exported to: {export_errors}")

                logger.error("Validation failed with errors")
                sys.exit(1)

            if json_output:
                click.echo(json_lib.dumps(result.to_dict(), indent=2))
            else:
                report = result.format_report()
                if result.has_warnings:
                    click.secho(report, fg="yellow")
                else:
                    click.secho(report, fg="green")

            logger.info("Validation complete. Exit code: 0")
            sys.exit(0)

        except ValidationError as e:
            click.secho(f"Validation Error: {e}", fg="red", err=True)
            logger.error(f"Validation error: {e}")
            sys.exit(1)
        except FileNotFoundError as e:
            click.secho(f"File not found: {e}", fg="red", err=True)
            logger.error(f"File not found: {e}")
            sys.exit(1)
