"""Counter-offer pricing helpers."""

from collabdesk.pricing.band import (
    BAND_HIGH_MARKUP,
    BAND_LOW_MARKUP,
    CounterOfferBand,
    OfferAssessment,
    assess_offer,
    counter_offer_band,
)

__all__ = [
    "BAND_HIGH_MARKUP",
    "BAND_LOW_MARKUP",
    "CounterOfferBand",
    "OfferAssessment",
    "assess_offer",
    "counter_offer_band",
]
