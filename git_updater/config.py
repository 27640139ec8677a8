"""Configuration loading."""

import os
from datetime import timedelta
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .headers.models import DEFAULT_CHANGELOG
from .upgrader.reconciler import MatchPolicy

REFRESH_HOURS_ENV = "GIT_UPDATER_REFRESH_HOURS"


class HostSettings(BaseModel):
    """Where the host keeps its packages."""

    plugins_dir: Path = Field(Path("wp-content/plugins"), description="Plugins directory")
    themes_dir: Path = Field(Path("wp-content/themes"), description="Theme root")
    multisite: bool = Field(False, description="List every theme under the theme root")


class UpdaterSettings(BaseModel):
    """Behaviour of scanning, reconciliation and outbound HTTP."""

    refresh_hours: int = Field(1, ge=1, description="Hours between remote checks")
    verify_ssl: bool = Field(True, description="Verify TLS certificates on outbound requests")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    match_policy: MatchPolicy = Field(MatchPolicy.SUBSTRING, description="Archive matching policy")
    strict_descriptors: bool = Field(False, description="Raise on malformed repository URIs")
    changelog_placeholder: str = Field(DEFAULT_CHANGELOG)

    @property
    def refresh_interval(self) -> timedelta:
        return timedelta(hours=self.refresh_hours)


class Settings(BaseModel):
    host: HostSettings = Field(default_factory=HostSettings)
    updater: UpdaterSettings = Field(default_factory=UpdaterSettings)


def parse_config(data: dict | None, environ: dict | None = None) -> Settings:
    """Validate raw config data, applying environment overrides."""
    data = dict(data or {})
    environ = os.environ if environ is None else environ

    override = environ.get(REFRESH_HOURS_ENV)
    if override:
        updater = dict(data.get("updater") or {})
        updater["refresh_hours"] = override
        data["updater"] = updater

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_path: Path | str, environ: dict | None = None) -> Settings:
    """Load configuration from a YAML file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    return parse_config(data, environ)
