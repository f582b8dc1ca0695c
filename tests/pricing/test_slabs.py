"""Tests for tiered (slab) fee calculation"""

import pytest

from pricing_app.data.models import PricingTier
from pricing_app.errors import InvalidValueError
from pricing_app.pricing.slabs import calculate_slab_fee, sort_tiers


class TestSlabFee:
    """Test progressive slab fee accumulation"""

    def test_two_tiers_spanning(self, two_tier_slabs):
        """Test units spanning both tiers are charged progressively"""
        # 100 * 100 + 50 * 75
        assert calculate_slab_fee(150, two_tier_slabs) == 13750

    def test_within_first_tier(self, two_tier_slabs):
        """Test units inside the first tier only"""
        assert calculate_slab_fee(50, two_tier_slabs) == 5000

    def test_exactly_at_boundary(self, two_tier_slabs):
        """Test unit count on a tier boundary"""
        assert calculate_slab_fee(100, two_tier_slabs) == 10000

    def test_zero_units(self, two_tier_slabs):
        """Test zero units cost nothing"""
        assert calculate_slab_fee(0, two_tier_slabs) == 0

    def test_empty_tiers(self):
        """Test empty tier set short-circuits to zero"""
        assert calculate_slab_fee(500, []) == 0.0

    def test_unsorted_tiers(self, two_tier_slabs):
        """Test tiers are sorted before use"""
        reversed_tiers = tuple(reversed(two_tier_slabs))
        assert calculate_slab_fee(150, reversed_tiers) == 13750

    def test_three_tiers(self):
        """Test accumulation across three tiers"""
        tiers = [
            PricingTier(from_units=0, to_units=10, rate_per_unit=5),
            PricingTier(from_units=10, to_units=50, rate_per_unit=4),
            PricingTier(from_units=50, to_units=None, rate_per_unit=3),
        ]
        # 10 * 5 + 40 * 4 + 10 * 3
        assert calculate_slab_fee(60, tiers) == 240

    def test_units_above_bounded_last_tier_are_not_charged(self):
        """Test a bounded final tier caps the charged units"""
        tiers = [
            PricingTier(from_units=0, to_units=100, rate_per_unit=1),
            PricingTier(from_units=100, to_units=200, rate_per_unit=2),
        ]
        assert calculate_slab_fee(250, tiers) == 300

    def test_fractional_units(self, two_tier_slabs):
        """Test fractional unit counts are charged proportionally"""
        assert calculate_slab_fee(100.5, two_tier_slabs) == pytest.approx(10037.5)

    def test_monotonic_in_units(self, two_tier_slabs):
        """Test fee never decreases as units grow"""
        previous = 0.0
        for units in range(0, 400, 7):
            fee = calculate_slab_fee(units, two_tier_slabs)
            assert fee >= previous
            previous = fee

    def test_negative_units_rejected(self, two_tier_slabs):
        """Test negative units are rejected"""
        with pytest.raises(InvalidValueError):
            calculate_slab_fee(-1, two_tier_slabs)


class TestSortTiers:
    """Test tier ordering helper"""

    def test_sorted_by_from_units(self, two_tier_slabs):
        ordered = sort_tiers(reversed(two_tier_slabs))
        assert [t.from_units for t in ordered] == [0, 100]
