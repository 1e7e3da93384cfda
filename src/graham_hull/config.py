from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class Config:
    """
    YAML-backed run configuration.

    Top-level sections of a loaded document replace the matching keys of
    the built-in defaults; sections the document omits keep their defaults.
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = self._merge(self._default_config(), data or {})

    def __getitem__(self, key: str):
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Config(keys={list(self._data.keys())})"

    @classmethod
    def from_file(cls, config_path: Path | str) -> "Config":
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        logger.info("Loading configuration from: %s", config_path)
        loaded = yaml.safe_load(config_path.read_text()) or {}

        if not isinstance(loaded, dict):
            raise ValueError(
                f"Expected a mapping at the top of {config_path}, "
                f"got {type(loaded).__name__}"
            )
        return cls(loaded)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "Config":
        """Load ``config_path``, else the packaged config.yaml, else defaults."""
        if config_path is not None:
            return cls.from_file(config_path)
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_file(DEFAULT_CONFIG_PATH)
        return cls()

    def get_nested(self, *keys):
        result = self._data
        try:
            for key in keys:
                result = result[key]
        except (KeyError, TypeError):
            return None
        return result

    def _merge(self, defaults: dict, overrides: dict) -> dict:
        merged = dict(defaults)
        for section, values in overrides.items():
            base = merged.get(section)
            if isinstance(base, dict) and isinstance(values, dict):
                merged[section] = {**base, **values}
            else:
                merged[section] = values
        return merged

    def _default_config(self) -> dict:
        return {
            'points': {'count': 3000, 'bound': 0.975, 'seed': None},
            'scan': {'sort_strategy': 'merge'},
            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%H:%M:%S',
                'file': None,
            },
        }
