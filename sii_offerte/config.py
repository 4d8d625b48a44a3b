from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults


@dataclass(frozen=True, slots=True)
class ExporterConfig:
    output_dir: Path = field(default_factory=lambda: Path(Defaults.OUTPUT_DIR))
    cleanup_delay: float = Defaults.CLEANUP_DELAY
    validate: bool = Defaults.VALIDATE
    action: str = Defaults.ACTION

    def __post_init__(self) -> None:
        if self.cleanup_delay < 0:
            raise ValueError(
                f"cleanup_delay must be non-negative, got {self.cleanup_delay}"
            )
        if self.action not in Constraints.ACTIONS:
            raise ValueError(
                f"action must be one of {', '.join(Constraints.ACTIONS)}, got {self.action!r}"
            )

    @classmethod
    def from_env(cls) -> ExporterConfig:
        return cls(
            output_dir=Path(os.getenv("SII_OUTPUT_DIR", Defaults.OUTPUT_DIR)),
            cleanup_delay=float(
                os.getenv("SII_CLEANUP_DELAY", str(Defaults.CLEANUP_DELAY))
            ),
            validate=_parse_bool(
                os.getenv("SII_VALIDATE"), default=Defaults.VALIDATE
            ),
            action=os.getenv("SII_ACTION", Defaults.ACTION).strip().upper(),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ExporterConfig:
        config = ExporterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ExporterConfig
    ) -> ExporterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        paths = _get_table(data, "paths")
        export = _get_table(data, "export")
        output_dir = base_config.output_dir
        if value := paths.get("output_dir"):
            output_dir = Path(str(value))
        cleanup_delay = base_config.cleanup_delay
        if (value := export.get("cleanup_delay")) is not None:
            cleanup_delay = _coerce_float(value, key="export.cleanup_delay")
        validate = base_config.validate
        if (value := export.get("validate")) is not None:
            if not isinstance(value, bool):
                raise ValueError(
                    f"export.validate must be a bool, got {type(value).__name__}"
                )
            validate = value
        action = base_config.action
        if (value := export.get("action")) is not None:
            action = str(value).strip().upper()
        return ExporterConfig(
            output_dir=output_dir,
            cleanup_delay=cleanup_delay,
            validate=validate,
            action=action,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _parse_bool(raw: str | None, *, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on", "si"}
