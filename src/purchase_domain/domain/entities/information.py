"""Product information value object."""

from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass(frozen=True)  # Value objects are immutable
class Information:
    """
    Information about a purchasable product, as provided by a purchase manager.

    Any field may be None when the purchase manager cannot supply it. Equality and
    hashing only consider the three localized text fields; the price fields are
    carried along but never compared.
    """

    UNAVAILABLE: ClassVar["Information"]

    local_name: Optional[str] = None
    local_description: Optional[str] = None
    local_pricing: Optional[str] = None  # Formatted for display, e.g. "$0.99"
    price_in_cents: Optional[int] = field(default=None, compare=False, repr=False)
    price_currency_code: Optional[str] = field(default=None, compare=False, repr=False)

    @classmethod
    def new_builder(cls) -> "InformationBuilder":
        return InformationBuilder()


class InformationBuilder:
    """Fluent builder for Information; every setter returns the builder itself."""

    def __init__(self) -> None:
        self._local_name: Optional[str] = None
        self._local_description: Optional[str] = None
        self._local_pricing: Optional[str] = None
        self._price_in_cents: Optional[int] = None
        self._price_currency_code: Optional[str] = None

    def local_name(self, val: Optional[str]) -> "InformationBuilder":
        self._local_name = val
        return self

    def local_description(self, val: Optional[str]) -> "InformationBuilder":
        self._local_description = val
        return self

    def local_pricing(self, val: Optional[str]) -> "InformationBuilder":
        self._local_pricing = val
        return self

    def price_in_cents(self, val: Optional[int]) -> "InformationBuilder":
        self._price_in_cents = val
        return self

    def price_currency_code(self, val: Optional[str]) -> "InformationBuilder":
        self._price_currency_code = val
        return self

    def build(self) -> Information:
        return Information(
            local_name=self._local_name,
            local_description=self._local_description,
            local_pricing=self._local_pricing,
            price_in_cents=self._price_in_cents,
            price_currency_code=self._price_currency_code,
        )


# Returned by purchase managers that do not support product information at all
Information.UNAVAILABLE = Information(None, None, None)
