"""Tax calculation for every supported country."""

from functools import singledispatchmethod
from typing import Optional

from ..config.defaults import TaxParams
from ..errors import UnsupportedCountryError
from ..logging.config import get_principle_logger
from .countries import Country, UnitedKingdom, UnitedStates

logger = get_principle_logger(__name__, "single_responsibility")


class TaxCalculator:
    """
    Computes average tax per country.

    One overload per country type; all use floor division of the average
    citizen income by that country's configured divisor.
    """

    def __init__(self, params: Optional[TaxParams] = None):
        self.params = params or TaxParams()

    @singledispatchmethod
    def calculate_tax(self, country) -> int:
        """
        Calculate the average tax for a country.

        Raises:
            UnsupportedCountryError: If no rule is registered for the type
        """
        country_type = type(country).__name__
        logger.warning("No tax rule for country", country_type=country_type)
        raise UnsupportedCountryError(
            f"No tax rule registered for {country_type}",
            country_type=country_type,
        )

    @calculate_tax.register
    def _(self, country: UnitedStates) -> int:
        return self._divide(country, self.params.us_divisor)

    @calculate_tax.register
    def _(self, country: UnitedKingdom) -> int:
        return self._divide(country, self.params.uk_divisor)

    def _divide(self, country: Country, divisor: int) -> int:
        tax = country._avg_citizen_income // divisor
        logger.debug(
            "Tax calculated",
            country=type(country).__name__,
            divisor=divisor,
            tax=tax,
        )
        return tax
