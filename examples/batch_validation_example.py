"""Batch validation example.

Validates a CSV file of national IDs, prints the report and exports the
failing rows next to the input.

Usage:
    python examples/batch_validation_example.py people.csv
"""

import sys
from pathlib import Path

from egypt_nid.batch import (
    export_invalid_rows,
    load_national_ids_csv,
    validate_national_ids,
)
from egypt_nid.config import load_config
from egypt_nid.logging_audit import configure_logging_from_config


def main(csv_path: Path) -> int:
    config = load_config()
    configure_logging_from_config(config.logging)

    column = config.validation.id_column
    df = load_national_ids_csv(csv_path, column=column)
    result = validate_national_ids(
        df,
        column=column,
        validate_checksum=config.validation.validate_checksum,
        warn_on_likely_expired=config.validation.warn_on_likely_expired,
    )

    print(result.format_report())

    if result.has_errors:
        error_path = csv_path.with_name(f"{csv_path.stem}_errors.csv")
        export_invalid_rows(df, result, error_path)
        print(f"\nInvalid rows exported to: {error_path}")
        return 1
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(main(Path(sys.argv[1])))
