"""
Configuration constants for waypoint pathfinding.

Module-level constants cover the defaults; ``load_config`` reads overrides
from a YAML file for applications that embed the pathfinder.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
import logging
import os

# =============================================================================
# Pathfinding
# =============================================================================

# Parent marker for vertices with no predecessor (the start, or unreached).
NO_PARENT = -1

# =============================================================================
# Table Parsing
# =============================================================================

# Column separator in waypoint tables: id;[conn,...];[dist,...]
TABLE_DELIMITER = ";"

# Separator inside the bracketed connection/distance lists
LIST_SEPARATOR = ","

# =============================================================================
# Logging
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("WAYPOINT_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


@dataclass(frozen=True)
class PathfindingConfig:
    delimiter: str = TABLE_DELIMITER
    log_level: str = LOG_LEVEL


def load_config(path: Path) -> PathfindingConfig:
    """
    Read a PathfindingConfig from a YAML mapping.

    Missing keys keep their defaults. Unknown keys and null values raise
    ValueError. Pass the result to ``apply_logging_config`` and
    ``waypoint_parser.load_table_with_config``.
    """
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")

    known = {f.name for f in fields(PathfindingConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    empty = sorted(k for k, v in data.items() if v is None)
    if empty:
        raise ValueError(f"Config keys without a value: {', '.join(empty)}")

    return PathfindingConfig(**{k: str(v) for k, v in data.items()})


def configure_logging(level: str | int | None = None) -> None:
    """Install the package log format on the root logger."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def apply_logging_config(cfg: PathfindingConfig) -> None:
    configure_logging(cfg.log_level)
