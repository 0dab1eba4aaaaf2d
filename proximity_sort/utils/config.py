"""Configuration loading and validation.

Loads YAML config files and provides typed access to sort parameters.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "PROXIMITY_SORT_CONFIG"


@dataclass
class SortConfig:
    read0: bool = False
    print0: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = ""
    console: bool = True


@dataclass
class ProximitySortConfig:
    """Top-level configuration."""
    name: str = "proximity-sort"
    version: str = "0.1.0"

    sort: SortConfig = field(default_factory=SortConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_dataclass(cls, data: dict):
    """Build a flat dataclass from a dict, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in field_names})


def load_config(path: str | Path) -> ProximitySortConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Fully populated ProximitySortConfig object.
    """
    path = Path(path)
    with open(path, "r") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return ProximitySortConfig()

    config = ProximitySortConfig(
        name=raw.get("name", "proximity-sort"),
        version=str(raw.get("version", "0.1.0")),
    )

    if "sort" in raw:
        config.sort = _build_dataclass(SortConfig, raw["sort"])
    if "logging" in raw:
        config.logging = _build_dataclass(LoggingConfig, raw["logging"])

    return config


def save_config(config: ProximitySortConfig, path: str | Path) -> None:
    """Save configuration to a YAML file."""
    path = Path(path)
    with open(path, "w") as f:
        yaml.dump(dataclasses.asdict(config), f, default_flow_style=False, sort_keys=False)
