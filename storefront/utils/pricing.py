# storefront/utils/pricing.py
"""Order pricing over cart lines and a shipping tier.

Money is integer cents everywhere in here. Turning cents into "35.00" happens
only in ``format_money``/``format_shipping``, which the snapshot layer calls when
building display fields.
"""
from typing import Dict, Iterable, Mapping

from pydantic import BaseModel

from storefront.models.cart import CartLine
from storefront.models.checkout import ShippingTier

ShippingTable = Dict[ShippingTier, int]


class OrderTotals(BaseModel):
    subtotal_cents: int
    shipping_cents: int
    total_cents: int


def build_shipping_table(settings) -> ShippingTable:
    table = {
        ShippingTier.EXPRESS: settings.SHIPPING_EXPRESS_CENTS,
        ShippingTier.STANDARD: settings.SHIPPING_STANDARD_CENTS,
        ShippingTier.PICKUP: settings.SHIPPING_PICKUP_CENTS,
    }
    validate_shipping_table(table)
    return table


def validate_shipping_table(table: Mapping[ShippingTier, int]) -> None:
    missing = [tier.value for tier in ShippingTier if tier not in table]
    if missing:
        raise ValueError(f"Shipping table has no cost for: {', '.join(missing)}")
    negative = [tier.value for tier, cost in table.items() if cost < 0]
    if negative:
        raise ValueError(f"Shipping cost must be non-negative: {', '.join(negative)}")


def line_total(line: CartLine) -> int:
    return line.quantity * line.unit_price_cents


def subtotal(lines: Iterable[CartLine]) -> int:
    return sum(line_total(line) for line in lines)


def shipping_cost(tier: ShippingTier, table: Mapping[ShippingTier, int]) -> int:
    return table[ShippingTier(tier)]


def total(lines: Iterable[CartLine], tier: ShippingTier, table: Mapping[ShippingTier, int]) -> int:
    return subtotal(lines) + shipping_cost(tier, table)


def compute_totals(lines: Iterable[CartLine], tier: ShippingTier, table: Mapping[ShippingTier, int]) -> OrderTotals:
    lines = list(lines)
    sub = subtotal(lines)
    ship = shipping_cost(tier, table)
    return OrderTotals(subtotal_cents=sub, shipping_cents=ship, total_cents=sub + ship)


def format_money(cents: int) -> str:
    return f"{cents // 100}.{cents % 100:02d}"


def format_shipping(cents: int) -> str:
    return "FREE" if cents == 0 else f"${format_money(cents)}"
