"""Tests for counter-offer band calculation and offer assessment."""

from __future__ import annotations

from decimal import Decimal

import pytest

from collabdesk.pricing.band import (
    CounterOfferBand,
    OfferAssessment,
    assess_offer,
    counter_offer_band,
)


class TestCounterOfferBand:
    def test_band_for_round_floor(self) -> None:
        assert counter_offer_band(1000) == CounterOfferBand(low=1200, high=1300)

    def test_band_rounds_inward(self) -> None:
        band = counter_offer_band(333)
        # 399.6 -> 400, 432.9 -> 432
        assert (band.low, band.high) == (400, 432)

    def test_low_end_stays_above_floor(self) -> None:
        band = counter_offer_band(1)
        assert band.low == 2
        assert band.high == 2

    def test_custom_markups(self) -> None:
        band = counter_offer_band(100, Decimal("1.10"), Decimal("1.50"))
        assert (band.low, band.high) == (110, 150)

    @pytest.mark.parametrize("rate", [0, -10])
    def test_rejects_non_positive_floor(self, rate: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            counter_offer_band(rate)

    def test_contains(self) -> None:
        band = counter_offer_band(1000)
        assert band.contains(1250)
        assert band.contains(1200)
        assert not band.contains(1000)
        assert not band.contains(Decimal("1300.5"))


class TestAssessOffer:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (None, OfferAssessment.NOT_STATED),
            (0, OfferAssessment.NOT_STATED),
            (100, OfferAssessment.BELOW_MINIMUM),
            (999, OfferAssessment.BELOW_MINIMUM),
            (1000, OfferAssessment.MEETS_MINIMUM),
            (5000, OfferAssessment.MEETS_MINIMUM),
        ],
    )
    def test_assessment(self, price: int | None, expected: OfferAssessment) -> None:
        assert assess_offer(price, 1000) == expected
