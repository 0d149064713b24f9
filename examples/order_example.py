#!/usr/bin/env python3
"""orderpipe Example.

This example demonstrates the ways to construct an Order:
- Direct construction with create_order
- OrderBuilder reuse (change one field, build again)
- SeasonalOrderBuilder toggles (seasonal offer + promo item)
- Generic pipe() with stage functions

Usage:
    uv run python examples/order_example.py
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from orderpipe import (
    Address,
    Coupon,
    Order,
    OrderBuilder,
    ProductLine,
    SeasonalOrderBuilder,
    create_order,
    promo_item,
    seasonal_offer,
)

# =============================================================================
# Sample Data
# =============================================================================

PRODUCTS = [
    ProductLine(name="Bumper", price=2, quantity=10),
    ProductLine(name="LED Light", price=200, quantity=1),
    ProductLine(name="Fog Light", price=0.5, quantity=100),
]

COUPONS = [
    Coupon(code="TEAL", discount=0.15, valid_till=datetime.now(timezone.utc) + timedelta(days=30)),
]

DELIVERY_ADDRESS = Address(
    country="Armenia",
    city="Yerevan",
    street="Bagramian",
    house="some-house",
    apartment="some-apartment",
)


def show(title: str, order: Order) -> None:
    """Print an order summary."""
    print(f"--- {title} ---")
    print(f"  username:   {order.username}")
    for product in order.products:
        print(f"  {product.name:<10} {product.price:>8.2f} x {product.quantity}")
    print(f"  total_cost: {order.total_cost:.2f}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Direct construction
    show("create_order", create_order(PRODUCTS, COUPONS, "anotherUser", DELIVERY_ADDRESS))

    # Builder reuse
    builder = (
        OrderBuilder()
        .with_products(PRODUCTS)
        .with_coupons(COUPONS)
        .with_username("superuser177")
        .with_delivery_address(DELIVERY_ADDRESS)
    )
    show("builder", builder.build())
    show("builder (another user)", builder.with_username("anotheruser").build())

    # Named toggles
    seasonal = (
        SeasonalOrderBuilder()
        .with_products(PRODUCTS)
        .with_coupons(COUPONS)
        .with_username("superuser177")
        .with_delivery_address(DELIVERY_ADDRESS)
        .with_seasonal_offer()
        .with_promo()
    )
    show("seasonal builder", seasonal.build())

    # Generic pipe: same result as the toggles above
    piped = (
        OrderBuilder()
        .with_products(PRODUCTS)
        .with_coupons(COUPONS)
        .with_username("superuser177")
        .with_delivery_address(DELIVERY_ADDRESS)
        .pipe(seasonal_offer, promo_item)
    )
    show("pipe", piped.build())


if __name__ == "__main__":
    main()
