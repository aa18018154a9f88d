"""
Project configuration models.

Parses ``uidlc.toml`` from the project directory into typed configuration
for the command line interface.

Example::

    [generation]
    stack = "react"
    output = "generated/"
    assets_prefix = "/static"
    log_level = "INFO"

    [package]
    dev_dependencies = { "prettier" = "^3.0.0" }
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

CONFIG_FILE_NAME = "uidlc.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GenerationConfig(BaseModel):
    """Generation settings."""

    model_config = ConfigDict(extra="forbid")

    stack: str = "react"
    output: str = "generated/"
    assets_prefix: str | None = None
    log_level: LogLevel = "INFO"


class PackageConfig(BaseModel):
    """Package manifest settings."""

    model_config = ConfigDict(extra="forbid")

    dev_dependencies: dict[str, str] = Field(default_factory=dict)


class UidlcConfig(BaseModel):
    """Complete project configuration."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    package: PackageConfig = Field(default_factory=PackageConfig)

    def get_output_path(self, project_root: Path) -> Path:
        """Get absolute output directory path."""
        output_dir = Path(self.generation.output)
        if output_dir.is_absolute():
            return output_dir
        return project_root / output_dir


def load_config(project_dir: Path) -> UidlcConfig:
    """
    Load configuration from ``uidlc.toml`` in ``project_dir``.

    Args:
        project_dir: Directory holding the configuration file

    Returns:
        UidlcConfig with parsed values, or defaults when the file is absent

    Raises:
        ConfigurationError: If the file is not valid TOML or has invalid values
    """
    toml_path = project_dir / CONFIG_FILE_NAME
    if not toml_path.exists():
        return UidlcConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid {CONFIG_FILE_NAME}: {e}") from e

    try:
        return UidlcConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {CONFIG_FILE_NAME}: {e}") from e
