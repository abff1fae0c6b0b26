"""Tests for the pricing engine."""

import pytest

from storefront.config import Settings
from storefront.models.cart import CartLine
from storefront.models.checkout import ShippingTier
from storefront.utils import pricing


def _line(qty, price=1000, color="blue"):
    return CartLine(
        key=f"short-sleeve:Medium:{color}",
        template_id="short-sleeve",
        title="Short Sleeve T-Shirt",
        size="Medium",
        color=color,
        quantity=qty,
        image="img.png",
        unit_price_cents=price,
    )


@pytest.fixture
def table():
    return pricing.build_shipping_table(Settings(_env_file=None))


class TestShippingTable:
    def test_default_costs(self, table):
        assert table == {
            ShippingTier.EXPRESS: 500,
            ShippingTier.STANDARD: 200,
            ShippingTier.PICKUP: 0,
        }

    def test_costs_come_from_settings(self):
        settings = Settings(_env_file=None, SHIPPING_EXPRESS_CENTS=999, SHIPPING_PICKUP_CENTS=50)
        table = pricing.build_shipping_table(settings)

        assert table[ShippingTier.EXPRESS] == 999
        assert table[ShippingTier.PICKUP] == 50

    def test_missing_tier_is_rejected(self):
        with pytest.raises(ValueError, match="pickup"):
            pricing.validate_shipping_table({ShippingTier.EXPRESS: 500, ShippingTier.STANDARD: 200})

    def test_negative_cost_is_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            pricing.validate_shipping_table(
                {ShippingTier.EXPRESS: 500, ShippingTier.STANDARD: -1, ShippingTier.PICKUP: 0}
            )


class TestTotals:
    def test_subtotal_sums_lines(self):
        lines = [_line(2), _line(1, color="white"), _line(4, price=1250, color="black")]

        assert pricing.subtotal(lines) == 2000 + 1000 + 5000

    def test_empty_cart(self, table):
        totals = pricing.compute_totals([], ShippingTier.STANDARD, table)

        assert totals.subtotal_cents == 0
        assert totals.total_cents == 200

    @pytest.mark.parametrize("tier", list(ShippingTier))
    def test_total_is_subtotal_plus_shipping(self, table, tier):
        lines = [_line(3), _line(2, color="white")]

        assert pricing.total(lines, tier, table) == pricing.subtotal(lines) + table[tier]

    def test_pickup_is_free(self, table):
        assert pricing.shipping_cost(ShippingTier.PICKUP, table) == 0

    def test_three_shirts_express(self, table):
        totals = pricing.compute_totals([_line(3)], ShippingTier.EXPRESS, table)

        assert totals.subtotal_cents == 3000
        assert totals.shipping_cents == 500
        assert totals.total_cents == 3500
        assert pricing.format_money(totals.subtotal_cents) == "30.00"
        assert pricing.format_money(totals.shipping_cents) == "5.00"
        assert pricing.format_money(totals.total_cents) == "35.00"

    def test_tier_accepts_plain_value(self, table):
        assert pricing.shipping_cost("standard", table) == 200


class TestFormatting:
    @pytest.mark.parametrize(
        "cents, expected",
        [(0, "0.00"), (5, "0.05"), (200, "2.00"), (1999, "19.99"), (123456, "1234.56")],
    )
    def test_format_money(self, cents, expected):
        assert pricing.format_money(cents) == expected

    def test_format_shipping(self):
        assert pricing.format_shipping(0) == "FREE"
        assert pricing.format_shipping(500) == "$5.00"
