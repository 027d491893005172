"""
Global Configuration and Defaults.

This module centralizes the table defaults and the limits applied to
structural parameters, and loads per-project overrides from
`.tablegraph/config.yaml`.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# --- Structural limits ---
DEFAULT_COLUMNS = 3
DEFAULT_BODY_ROWS = 3

# Counts above these are capped rather than rejected
MAX_COLUMNS = 50
MAX_BODY_ROWS = 500

# --- Locations ---
CONFIG_DIR = ".tablegraph"
CONFIG_FILE = "config.yaml"


class TableOptions(BaseModel):
    """
    Everything the builder needs besides the grid itself.

    Negative counts are clamped to zero; oversized counts are capped.
    When a grid is supplied, `columns` and `body_rows` are derived from it.
    """
    columns: int = DEFAULT_COLUMNS
    body_rows: int = DEFAULT_BODY_ROWS
    include_header: bool = True
    include_footer: bool = False

    table_class: str = ""
    head_class: str = ""
    body_class: str = ""
    foot_class: str = ""
    row_class: str = ""
    cell_class: str = ""

    header_cells_th: bool = True
    table_role: bool = True
    span_fallback: bool = False
    wrap_in_section: bool = False

    # Whether grid row 0 is a header row
    header_row: bool = True

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @field_validator("columns")
    @classmethod
    def _clamp_columns(cls, value: int) -> int:
        return min(max(value, 0), MAX_COLUMNS)

    @field_validator("body_rows")
    @classmethod
    def _clamp_body_rows(cls, value: int) -> int:
        return min(max(value, 0), MAX_BODY_ROWS)

    def merged(self, **overrides: Any) -> "TableOptions":
        """Copy with non-None overrides applied (CLI flags over config)."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return TableOptions.model_validate({**self.model_dump(), **updates})


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",
    "table": TableOptions().model_dump(),
}


def default_config_path(root_dir: Path | None = None) -> Path:
    return (root_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(path: Path | None = None) -> TableOptions:
    """
    Load table defaults from YAML.

    A missing file yields the built-in defaults. Unreadable YAML or invalid
    option values raise ConfigError.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return TableOptions()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a mapping at top level")

    table = data.get("table") or {}
    if not isinstance(table, dict):
        raise ConfigError(f"{config_path}: 'table' must be a mapping")

    try:
        options = TableOptions.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    logger.info(f"Loaded table options from {config_path}")
    return options
