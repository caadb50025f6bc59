from __future__ import annotations

import json
from datetime import datetime, time
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import CheckerConfig, ColumnLayout, ValidationConfig

"""Config loader.

Responsibilities:
- Load the YAML config (default config/horas_extras.yml)
- Validate it against config_schema.json (shipped next to this module)
- Apply defaults for every optional key and build CheckerConfig
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/horas_extras.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the config
            data fails schema validation (missing keys, wrong types, extra keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _to_time(value: Any, key: str) -> time:
    # YAML 1.1 は 16:42 のような値を 60 進整数 (1002) として読むため分として解釈する
    if isinstance(value, int):
        hours, minutes = divmod(value, 60)
        if hours > 23:
            raise ConfigError(f"{key}: out of range: {value}")
        return time(hours, minutes)
    try:
        return datetime.strptime(str(value).strip(), "%H:%M").time()
    except ValueError as e:
        raise ConfigError(f"{key}: invalid time '{value}' (expected HH:MM)") from e


def _build_validation(raw: dict[str, Any]) -> ValidationConfig:
    defaults = ValidationConfig()
    kwargs: dict[str, Any] = {}
    if "band_start" in raw:
        kwargs["band_start"] = _to_time(raw["band_start"], "validation.band_start")
    if "band_end" in raw:
        kwargs["band_end"] = _to_time(raw["band_end"], "validation.band_end")
    kwargs["band_overlap_is_error"] = raw.get("band_overlap_is_error", defaults.band_overlap_is_error)
    for key in ("date_formats", "time_formats", "weekday_labels"):
        if key in raw:
            kwargs[key] = tuple(raw[key])
    if "report_date_format" in raw:
        kwargs["report_date_format"] = raw["report_date_format"]
    try:
        return ValidationConfig(**kwargs)
    except ValueError as e:
        raise ConfigError(f"invalid validation settings: {e}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> CheckerConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config root must be a mapping")

    _validate_config_schema(data)

    columns = ColumnLayout(**data.get("columns", {}))
    output_cols = {columns.weekday, columns.errors}
    input_cols = {columns.date, columns.start, columns.end, columns.detail}
    if len(output_cols) != 2 or output_cols & input_cols:
        raise ConfigError("columns: output columns must be distinct from each other and from input columns")

    return CheckerConfig(
        source_directory=data["source_directory"],
        input_sheet=data.get("input_sheet", "Entrada"),
        output_sheet=data.get("output_sheet", "Salida"),
        columns=columns,
        validation=_build_validation(data.get("validation", {})),
    )
