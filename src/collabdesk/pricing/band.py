"""Counter-offer band calculation and offer assessment.

The agent never quotes the influencer's minimum rate.  When it counters, it
aims for a number 20-30% above that floor; this module computes the band in
whole currency units with Decimal arithmetic so the prompt can name a
concrete target range.
"""

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from enum import StrEnum

from pydantic import BaseModel

# Counter-offer target band, as multipliers of the minimum rate.
BAND_LOW_MARKUP = Decimal("1.20")
BAND_HIGH_MARKUP = Decimal("1.30")

_WHOLE_UNITS = Decimal("1")


class OfferAssessment(StrEnum):
    """How a business's offered price relates to the influencer's floor."""

    NOT_STATED = "not_stated"
    BELOW_MINIMUM = "below_minimum"
    MEETS_MINIMUM = "meets_minimum"


class CounterOfferBand(BaseModel, frozen=True):
    """Target range for a counter-offer.

    Attributes:
        low: Lowest number the agent should propose (strictly above the floor).
        high: Highest number the agent should propose.
    """

    low: int
    high: int

    def contains(self, amount: int | Decimal) -> bool:
        """Return True if *amount* lies inside the band (inclusive)."""
        return self.low <= amount <= self.high


def counter_offer_band(
    minimum_rate: int,
    low_markup: Decimal = BAND_LOW_MARKUP,
    high_markup: Decimal = BAND_HIGH_MARKUP,
) -> CounterOfferBand:
    """Compute the counter-offer band for a minimum rate.

    The low end rounds up and the high end rounds down so both stay inside
    the markup range.  For very small floors where rounding would invert the
    band, the high end is raised to the low end.

    Args:
        minimum_rate: The influencer's private rate floor (positive).
        low_markup: Multiplier for the low end. Defaults to 1.20.
        high_markup: Multiplier for the high end. Defaults to 1.30.

    Returns:
        The ``CounterOfferBand`` in whole currency units.

    Raises:
        ValueError: If *minimum_rate* is not positive.
    """
    if minimum_rate <= 0:
        raise ValueError(f"minimum_rate must be positive, got {minimum_rate}")
    floor = Decimal(minimum_rate)
    low = int((floor * low_markup).quantize(_WHOLE_UNITS, rounding=ROUND_CEILING))
    high = int((floor * high_markup).quantize(_WHOLE_UNITS, rounding=ROUND_FLOOR))
    low = max(low, minimum_rate + 1)
    return CounterOfferBand(low=low, high=max(high, low))


def assess_offer(price: int | None, minimum_rate: int) -> OfferAssessment:
    """Classify an offered price against the minimum rate.

    A missing or zero price counts as not stated.
    """
    if not price:
        return OfferAssessment.NOT_STATED
    if price < minimum_rate:
        return OfferAssessment.BELOW_MINIMUM
    return OfferAssessment.MEETS_MINIMUM
