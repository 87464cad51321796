"""
Single responsibility example.

Countries only hold their data; every tax rule lives in TaxCalculator, so a
policy change touches one class instead of every country.
"""

from .calculator import TaxCalculator
from .countries import Country, UnitedKingdom, UnitedStates

__all__ = ["Country", "TaxCalculator", "UnitedKingdom", "UnitedStates"]
