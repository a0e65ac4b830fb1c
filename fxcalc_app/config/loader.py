"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..models.instruments import RateTable
from .defaults import (
    AccountCurrencyParams,
    DefaultConfig,
    IndicatorParams,
    LotParams,
    PipParams,
    RateParams,
    RiskParams,
    get_default_config,
)
from .validation import ConfigValidator, ConfigurationError

_SECTIONS = {
    "pips": PipParams,
    "lots": LotParams,
    "account_currency": AccountCurrencyParams,
    "indicators": IndicatorParams,
    "risk": RiskParams,
    "rates": RateParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load calculator overrides from calculator.yaml, if present."""
        return self._load_yaml("calculator.yaml")

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. calculator.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration and rebuild the typed DefaultConfig from it.

        Raises:
            ConfigurationError: If the merged values fail validation
        """
        merged = self.merge_config(overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(errors)

        sections = {}
        for name, params_cls in _SECTIONS.items():
            values = merged.get(name, {})
            kwargs = {}
            for f in fields(params_cls):
                if f.name not in values:
                    continue
                value = values[f.name]
                # YAML has no tuples and may key z-scores by int
                if isinstance(getattr(getattr(self.defaults, name), f.name), tuple):
                    value = tuple(value)
                if f.name == "var_z_scores":
                    value = {float(k): float(v) for k, v in value.items()}
                kwargs[f.name] = value
            sections[name] = params_cls(**kwargs)
        return DefaultConfig(**sections)

    def load_rate_table(self) -> RateTable:
        """
        Load the reference price table from rates.yaml.

        Falls back to the built-in static prices when the file is missing.
        The file may either be a flat mapping or carry a top-level
        ``rates`` key.
        """
        data = self._load_yaml("rates.yaml")
        prices = data.get("rates", data) if data else self.defaults.rates.instrument_prices
        return RateTable.from_mapping(
            prices,
            default=self.defaults.rates.missing_rate_default,
        )

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename

        if not path.exists():
            return {}

        with open(path) as f:
            loaded = yaml.safe_load(f)

        return loaded or {}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, dict):
                    result[field_name] = dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
