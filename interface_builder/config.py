"""Configuration loading."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path("interface-builder.yaml")


class BuildConfig(BaseModel):
    """Settings for interface generation."""
    contracts_dir: str = Field("./contracts", description="Root scanned by batch builds")
    packages_dir: str = Field("node_modules", description="Package root for '@' module paths")
    dialect: Literal["auto", "custom", "legacy"] = Field(
        "auto", description="Directive syntax: custom (/// @custom:interface), legacy (/// !interface) or auto"
    )
    license: str = Field("MIT", description="SPDX identifier written to every interface")
    pragma: str = Field("^0.8.20", description="Solidity version pragma written to every interface")
    skip_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules", ".git", "artifacts", "cache"],
        description="Directory names skipped during discovery",
    )
    force: bool = Field(False, description="Regenerate even when outputs are up to date")


def load_config(config_path: Path | str | None = None) -> BuildConfig:
    """Load configuration from a YAML file.

    With no path, ``interface-builder.yaml`` in the working directory is used
    if present, otherwise defaults. An explicit path must exist.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return BuildConfig()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

    data = yaml.safe_load(config_path.read_text()) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {config_path}")

    try:
        return BuildConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config in {config_path}: {e}") from e
