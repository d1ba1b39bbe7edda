"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ux_eval.config.domain.config import EngineConfig
from ux_eval.config.domain.observer import ConfigObserver
from ux_eval.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlConfigLoader:
    """Loads, validates, and returns an EngineConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> EngineConfig:
        """
        Load and validate an EngineConfig from a YAML override file.

        Sections and fields absent from the file keep their defaults. An empty
        file yields ``EngineConfig()``.

        Raises:
            ConfigLoadError: if the file does not exist.
            ConfigValidationError: if the file is not valid YAML, is not a
                mapping, or violates the schema.
        """
        raw = _parse_yaml(path=path)
        if raw is None:
            self._observer.config_defaults_used(path=str(path))
            cfg = EngineConfig()
        else:
            cfg = _build_config(raw=raw)
        self._observer.config_loaded(
            path=str(path),
            severity_scale_version=cfg.aggregation.severity_scale.version,
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> EngineConfig:
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top level must be a mapping, got {type(raw).__name__}"
        )
    try:
        return EngineConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
