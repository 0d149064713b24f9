"""pytest 共通設定: 注文のサンプルデータ."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from orderpipe import Address, Coupon, OrderBuilder, ProductLine, config

FAR_FUTURE = datetime.now(timezone.utc) + timedelta(days=3650)


@pytest.fixture
def products() -> list[ProductLine]:
    """基本の商品明細（割引前 270）."""
    return [
        ProductLine(name="Bumper", price=2, quantity=10),
        ProductLine(name="LED Light", price=200, quantity=1),
        ProductLine(name="Fog Light", price=0.5, quantity=100),
    ]


@pytest.fixture
def coupons() -> list[Coupon]:
    """15% 引きのクーポン 1 枚."""
    return [Coupon(code="TEAL", discount=0.15, valid_till=FAR_FUTURE)]


@pytest.fixture
def address() -> Address:
    """配送先住所."""
    return Address(
        country="Armenia",
        city="Yerevan",
        street="Bagramian",
        house="some-house",
        apartment="some-apartment",
    )


@pytest.fixture
def builder(
    products: list[ProductLine],
    coupons: list[Coupon],
    address: Address,
) -> OrderBuilder:
    """全フィールド設定済みのビルダー."""
    return (
        OrderBuilder()
        .with_products(products)
        .with_coupons(coupons)
        .with_username("superuser177")
        .with_delivery_address(address)
    )


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """テストごとに設定を既定値に戻す."""
    monkeypatch.setattr(config, "STRICT_VALIDATION", False)
    monkeypatch.setattr(config, "ERROR_MESSAGE_LANGUAGE", "ja")
    monkeypatch.setattr(config, "ERROR_INCLUDE_ORDER", False)
