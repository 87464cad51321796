"""Default configuration parameters for the SOLID examples."""

from dataclasses import dataclass

from ..errors import ConfigurationError


@dataclass(frozen=True)
class TaxParams:
    """Per-country tax divisors applied to average citizen income."""
    us_divisor: int = 8                  # United States: income / 8
    uk_divisor: int = 10                 # United Kingdom: income / 10


@dataclass(frozen=True)
class ShapeParams:
    """Integer widths modeled by the shape examples."""
    dimension_bits: int = 16             # Widths, heights and lengths
    area_bits: int = 32                  # Widened range for area products

    def __post_init__(self):
        if self.area_bits < 2 * self.dimension_bits:
            raise ConfigurationError(
                "area_bits must be at least twice dimension_bits",
                context={"dimension_bits": self.dimension_bits, "area_bits": self.area_bits},
            )


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    tax: TaxParams
    shapes: ShapeParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        tax=TaxParams(),
        shapes=ShapeParams(),
    )
