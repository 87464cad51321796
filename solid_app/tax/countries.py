"""Country records holding an average citizen income."""

from typing import Any

from ..utils.ints import UINT16_BITS, ensure_uint


class Country:
    """
    Base country record.

    The income is fixed at construction and has no public accessor.
    TaxCalculator is the only reader of ``_avg_citizen_income``.
    """

    __slots__ = ("_avg_citizen_income",)

    def __init__(self, avg_income: int):
        object.__setattr__(
            self, "_avg_citizen_income",
            ensure_uint(avg_income, UINT16_BITS, "avg_income"),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UnitedStates(Country):
    __slots__ = ()


class UnitedKingdom(Country):
    __slots__ = ()
