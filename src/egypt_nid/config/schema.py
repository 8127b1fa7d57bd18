"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ValidationConfig(BaseModel):
    """Configuration for national ID validation.

    Attributes:
        validate_checksum: Whether to enforce the (unofficial) check digit
        id_column: CSV column holding national IDs for batch validation
        warn_on_likely_expired: Whether batch reports flag likely-expired cards
    """

    validate_checksum: bool = Field(
        default=False,
        description="Enforce the weighted-sum check digit"
    )
    id_column: str = Field(
        default="national_id",
        min_length=1,
        description="CSV column holding national IDs"
    )
    warn_on_likely_expired: bool = Field(
        default=True,
        description="Warn about cards past their estimated expiry"
    )

    @field_validator("id_column")
    @classmethod
    def validate_id_column(cls, v: str) -> str:
        """Validate the column name is not blank.

        Args:
            v: Column name

        Returns:
            Column name with surrounding whitespace removed

        Raises:
            ValueError: If the column name is blank
        """
        stripped = v.strip()
        if not stripped:
            raise ValueError("Invalid id_column: must not be blank")
        return stripped


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to mask national IDs in logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/egypt-nid.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=True,
        description="Mask national IDs in logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        validation: National ID validation settings
        logging: Logging settings

    Example:
        >>> config = Config()
        >>> config.validation.validate_checksum
        False
    """

    validation: ValidationConfig = ValidationConfig()
    logging: LoggingConfig = LoggingConfig()
