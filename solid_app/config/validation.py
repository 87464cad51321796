"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

TAX_FIELDS = ("us_divisor", "uk_divisor")
SHAPE_FIELDS = ("dimension_bits", "area_bits")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass but never a valid divisor or width
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _unknown_fields(params: dict[str, Any], known: tuple[str, ...]) -> list[ValidationError]:
    return [
        ValidationError(field=key, message="Unknown parameter", value=value)
        for key, value in params.items()
        if key not in known
    ]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_tax_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tax parameters."""
        errors = _unknown_fields(params, TAX_FIELDS)

        for field in TAX_FIELDS:
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_shape_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shape parameters."""
        errors = _unknown_fields(params, SHAPE_FIELDS)

        for field in SHAPE_FIELDS:
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=params[field]
                ))

        dimension_bits = params.get("dimension_bits")
        area_bits = params.get("area_bits")
        if _is_positive_int(dimension_bits) and _is_positive_int(area_bits):
            if area_bits < 2 * dimension_bits:
                errors.append(ValidationError(
                    field="area_bits",
                    message="Must be at least twice dimension_bits",
                    value=area_bits
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in ("tax", "shapes"):
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
            elif not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
            elif section == "tax":
                errors.extend(ConfigValidator.validate_tax_params(params))
            else:
                errors.extend(ConfigValidator.validate_shape_params(params))

        return errors
