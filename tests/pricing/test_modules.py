"""Tests for single module fee resolution"""

import pytest

from pricing_app.data.models import Module, PricingType
from pricing_app.errors import InvalidValueError, UnsupportedPricingTypeError
from pricing_app.pricing.modules import calculate_module_fee


def make_module(pricing_type, **kwargs) -> Module:
    return Module(id="m1", module_name="Test", pricing_type=pricing_type,
                  unit_type_id="u1", **kwargs)


class TestModuleFee:
    """Test fee resolution per pricing type"""

    def test_flat_ignores_units(self):
        """Test flat modules charge the monthly fee regardless of units"""
        module = make_module(PricingType.FLAT, monthly_fee=1000)
        assert calculate_module_fee(0, module) == 1000
        assert calculate_module_fee(5000, module) == 1000

    def test_flat_without_fee(self):
        """Test flat module with no fee configured"""
        assert calculate_module_fee(10, make_module(PricingType.FLAT)) == 0

    def test_per_unit(self):
        """Test per-unit modules multiply units by the rate"""
        module = make_module(PricingType.PER_UNIT, monthly_fee=0.5)
        assert calculate_module_fee(1500, module) == pytest.approx(750)

    def test_slab(self, two_tier_slabs):
        """Test slab modules use progressive tier pricing"""
        module = make_module(PricingType.SLAB, slabs=two_tier_slabs)
        assert calculate_module_fee(150, module) == 13750

    def test_slab_without_slabs(self):
        """Test slab module with no tiers charges nothing"""
        assert calculate_module_fee(150, make_module(PricingType.SLAB)) == 0

    def test_minimum_fee_floor(self):
        """Test module minimum floors a low usage fee"""
        module = make_module(PricingType.PER_UNIT, monthly_fee=0.5, module_minimum_fee=200)
        assert calculate_module_fee(100, module) == 200
        assert calculate_module_fee(1000, module) == 500

    def test_minimum_fee_floor_for_flat(self):
        """Test module minimum also applies to flat modules"""
        module = make_module(PricingType.FLAT, monthly_fee=50, module_minimum_fee=80)
        assert calculate_module_fee(0, module) == 80

    def test_zero_minimum_fee_is_no_floor(self):
        """Test zero minimum fee leaves the fee untouched"""
        module = make_module(PricingType.PER_UNIT, monthly_fee=2, module_minimum_fee=0)
        assert calculate_module_fee(0, module) == 0

    @pytest.mark.parametrize("units", [0, 1, 10, 99, 100, 101, 1000])
    def test_fee_never_below_minimum(self, units, two_tier_slabs):
        """Test the minimum floor holds for any unit count"""
        module = make_module(PricingType.SLAB, slabs=two_tier_slabs, module_minimum_fee=2500)
        assert calculate_module_fee(units, module) >= 2500

    def test_pricing_type_as_string(self):
        """Test pricing type given as plain string"""
        module = make_module("per_unit", monthly_fee=3)
        assert calculate_module_fee(4, module) == 12

    def test_unsupported_pricing_type(self):
        """Test unknown pricing types fail fast"""
        module = make_module("tiered", monthly_fee=3)
        with pytest.raises(UnsupportedPricingTypeError) as exc_info:
            calculate_module_fee(4, module)
        assert exc_info.value.pricing_type == "tiered"

    def test_negative_units_rejected(self):
        """Test negative units are rejected"""
        with pytest.raises(InvalidValueError):
            calculate_module_fee(-5, make_module(PricingType.FLAT, monthly_fee=1))
