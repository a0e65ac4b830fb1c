"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigurationError(ValueError):
    """Raised when a merged configuration fails validation."""

    def __init__(self, errors: list[ValidationError]):
        details = "; ".join(f"{e.field}: {e.message} (got {e.value!r})" for e in errors)
        super().__init__(f"Invalid configuration: {details}")
        self.errors = errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_pip_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pip parameters."""
        errors = []

        # Pip sizes and pip values are divisors and must never be zero
        for name in ("standard_pip_size", "jpy_pip_size", "metal_pip_size",
                     "pip_value_per_lot", "jpy_pip_value_per_lot"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        if "whole_unit_metals" in params:
            value = params["whole_unit_metals"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                errors.append(ValidationError(
                    field="whole_unit_metals",
                    message="Must be a list of currency codes",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_lot_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate lot parameters."""
        errors = []

        for name in ("contract_size", "mini_lots_per_lot", "micro_lots_per_lot",
                     "min_lot", "max_lot"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        min_lot = params.get("min_lot")
        max_lot = params.get("max_lot")
        if _is_number(min_lot) and _is_number(max_lot) and min_lot > max_lot:
            errors.append(ValidationError(
                field="min_lot",
                message="Must not exceed max_lot",
                value=min_lot
            ))

        return errors

    @staticmethod
    def validate_account_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate account currency conversion factors."""
        errors = []

        factors = params.get("factors", {})
        if not isinstance(factors, dict):
            errors.append(ValidationError(
                field="factors",
                message="Must be a mapping of currency code to factor",
                value=factors
            ))
            return errors

        for currency, value in factors.items():
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field=f"factors.{currency}",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator parameters."""
        errors = []

        if "min_series_length" in params:
            value = params["min_series_length"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                errors.append(ValidationError(
                    field="min_series_length",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        if "bollinger_std_dev_multiplier" in params:
            value = params["bollinger_std_dev_multiplier"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="bollinger_std_dev_multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        for name in ("fibonacci_levels", "fibonacci_extensions"):
            if name in params:
                value = params[name]
                if not isinstance(value, (list, tuple)) or not all(_is_number(v) for v in value):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a list of numbers",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_risk_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate money management parameters."""
        errors = []

        z_scores = params.get("var_z_scores", {})
        if isinstance(z_scores, dict):
            for confidence, z in z_scores.items():
                if not _is_number(confidence) or not 0 < confidence < 100:
                    errors.append(ValidationError(
                        field="var_z_scores",
                        message="Confidence levels must be percentages between 0 and 100",
                        value=confidence
                    ))
                if not _is_number(z) or z <= 0:
                    errors.append(ValidationError(
                        field=f"var_z_scores.{confidence}",
                        message="Must be a positive number",
                        value=z
                    ))
        else:
            errors.append(ValidationError(
                field="var_z_scores",
                message="Must be a mapping of confidence level to z-score",
                value=z_scores
            ))

        if "var_default_z_score" in params:
            value = params["var_default_z_score"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="var_default_z_score",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_rate_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate static rate tables."""
        errors = []

        if "missing_rate_default" in params:
            value = params["missing_rate_default"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="missing_rate_default",
                    message="Must be a positive number",
                    value=value
                ))

        for table in ("instrument_prices", "currency_rates"):
            for symbol, value in params.get(table, {}).items():
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"{table}.{symbol}",
                        message="Must be a positive number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "pips" in config:
            errors.extend(ConfigValidator.validate_pip_params(config["pips"]))

        if "lots" in config:
            errors.extend(ConfigValidator.validate_lot_params(config["lots"]))

        if "account_currency" in config:
            errors.extend(ConfigValidator.validate_account_currency_params(config["account_currency"]))

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "risk" in config:
            errors.extend(ConfigValidator.validate_risk_params(config["risk"]))

        if "rates" in config:
            errors.extend(ConfigValidator.validate_rate_params(config["rates"]))

        return errors
