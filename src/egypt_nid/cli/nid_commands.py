"""Single national ID CLI commands for egypt-nid.

This module provides the ``inspect``, ``validate`` and ``format`` commands,
which work on IDs passed as arguments.
"""

import json as json_lib
import logging
import sys

import click

from egypt_nid.config import Config
from egypt_nid.formatting import FORMAT_STYLES, format_national_id
from egypt_nid.localization import both_names
from egypt_nid.logging_audit import suppress_console_logging
from egypt_nid.national_id import NationalId, try_create
from egypt_nid.utils.exceptions import InvalidNationalIdError

logger = logging.getLogger(__name__)


def get_context_config(ctx: click.Context) -> Config:
    """Return the config loaded by the root group, or defaults."""
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    return Config()


def _bilingual(member) -> str:
    arabic, english = both_names(member)
    return f"{english} ({arabic})"


def _format_summary(national_id: NationalId) -> str:
    """Build the human-readable ``inspect`` report."""
    checksum_status = "valid" if national_id.has_valid_checksum else "unconfirmed"
    expiry = national_id.estimated_expiry_date.isoformat()
    if national_id.is_likely_expired:
        expiry += " (likely expired)"
    elif national_id.is_expiring_soon:
        expiry += " (expiring soon)"

    lines = [
        f"National ID:        {format_national_id(national_id, 'dashes')}",
        f"Birth date:         {national_id.birth_date.isoformat()}",
        f"Age:                {national_id.age}",
        f"Adult:              {'yes' if national_id.is_adult else 'no'}",
        f"Gender:             {_bilingual(national_id.gender)}",
        f"Governorate:        {_bilingual(national_id.governorate)} "
        f"[{national_id.governorate_code:02d}]",
        f"Region:             {_bilingual(national_id.region)}",
        f"Generation:         {_bilingual(national_id.generation)}",
        f"Serial number:      {national_id.serial_number:04d}",
        f"Checksum:           {checksum_status}",
        f"Card issued (est.): {national_id.estimated_issue_date.isoformat()}",
        f"Card expiry (est.): {expiry}",
    ]
    return "\n".join(lines)


@click.command("inspect")
@click.argument("national_id")
@click.option(
    "--validate-checksum",
    is_flag=True,
    help="Reject the ID if its check digit does not match",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def inspect_command(
    ctx: click.Context, national_id: str, validate_checksum: bool, json_output: bool
) -> None:
    """Decode a national ID and show everything it encodes.

    Exits with code 1 if the ID is invalid.

    Examples:

        # Human-readable breakdown
        egypt-nid inspect 30101010123458

        # Machine-readable output
        egypt-nid inspect 30101010123458 --json
    """
    config = get_context_config(ctx)
    enforce_checksum = validate_checksum or config.validation.validate_checksum

    with suppress_console_logging(json_output):
        logger.info(f"Inspecting national ID {national_id}")
        try:
            parsed = NationalId(national_id, validate_checksum=enforce_checksum)
        except InvalidNationalIdError as e:
            logger.error(f"Invalid national ID ({e.kind.value})")
            if json_output:
                click.echo(
                    json_lib.dumps(
                        {"valid": False, "kind": e.kind.value, "error": str(e)},
                        indent=2,
                    )
                )
            else:
                click.secho(f"Invalid national ID: {e}", fg="red", err=True)
            sys.exit(1)

        if json_output:
            click.echo(json_lib.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
        else:
            click.echo(_format_summary(parsed))


@click.command("validate")
@click.argument("national_ids", nargs=-1, required=True)
@click.option(
    "--validate-checksum",
    is_flag=True,
    help="Reject IDs whose check digit does not match",
)
@click.pass_context
def validate_command(
    ctx: click.Context, national_ids: tuple[str, ...], validate_checksum: bool
) -> None:
    """Validate one or more national IDs.

    Prints one line per ID. Exits with code 0 if every ID is valid, code 1
    otherwise.

    Examples:

        egypt-nid validate 30101010123458 30101011234565

        egypt-nid validate --validate-checksum 30101011234565
    """
    config = get_context_config(ctx)
    enforce_checksum = validate_checksum or config.validation.validate_checksum

    invalid_count = 0
    for value in national_ids:
        result = try_create(value, validate_checksum=enforce_checksum)
        if result.success:
            click.echo(click.style("✓", fg="green", bold=True) + f" {value}")
        else:
            invalid_count += 1
            click.echo(
                click.style("✗", fg="red", bold=True) + f" {value}: {result.error}"
            )

    logger.info(
        f"Validated {len(national_ids)} national IDs, {invalid_count} invalid"
    )
    if invalid_count:
        sys.exit(1)


@click.command("format")
@click.argument("national_id")
@click.option(
    "--style",
    type=click.Choice(sorted(FORMAT_STYLES)),
    default="dashes",
    show_default=True,
    help="Display style",
)
def format_command(national_id: str, style: str) -> None:
    """Print a national ID in a display format.

    Examples:

        # 3-010101-01-23458
        egypt-nid format 30101010123458

        # 301********58
        egypt-nid format 30101010123458 --style masked
    """
    result = try_create(national_id)
    if not result.success:
        click.secho(f"Invalid national ID: {result.error}", fg="red", err=True)
        sys.exit(1)

    click.echo(format_national_id(result.national_id, style))
