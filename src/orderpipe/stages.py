"""Order 用の標準ステージ.

いずれも ``(original, current) -> Order`` の形をした純粋関数で、
``OrderBuilder.pipe()`` にそのまま渡せる。
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from orderpipe.models import ProductLine
from orderpipe.order import Order

SEASONAL_PRICE_FACTOR = 0.8
"""季節割引後の価格倍率（20% 引き）."""

PROMO_ITEM = ProductLine(name="Seat", price=0, quantity=1)
"""販促品として追加する商品."""


def discount_products(factor: float) -> Callable[[Order, Order], Order]:
    """元の商品価格に ``factor`` を掛けるステージを生成する.

    価格は ``original`` の商品から計算するため、前段のステージで
    商品が変更されていても変更前の価格が基準になる。

    Args:
        factor: 価格倍率（0.8 なら 20% 引き）

    """

    def stage(original: Order, current: Order) -> Order:
        products = tuple(
            ProductLine(product.name, product.price * factor, product.quantity)
            for product in original.products
        )
        return current.with_changes(products=products)

    stage.__name__ = f"discount_products({factor})"
    return stage


def append_products(*lines: ProductLine) -> Callable[[Order, Order], Order]:
    """直前までの商品の末尾に ``lines`` を追加するステージを生成する."""

    def stage(original: Order, current: Order) -> Order:
        return current.with_changes(products=(*current.products, *lines))

    stage.__name__ = "append_products"
    return stage


def seasonal_offer(original: Order, current: Order) -> Order:
    """季節割引: 全商品の価格を 0.8 倍にする."""
    return discount_products(SEASONAL_PRICE_FACTOR)(original, current)


def promo_item(original: Order, current: Order) -> Order:
    """販促品 "Seat"（価格 0）を末尾に追加する."""
    return append_products(PROMO_ITEM)(original, current)


def drop_expired_coupons(at: datetime | None = None) -> Callable[[Order, Order], Order]:
    """``at`` 時点で期限切れのクーポンを取り除くステージを生成する.

    価格計算は有効期限を見ないため、期限切れを除外したい場合にだけ
    明示的に ``pipe()`` する。

    Args:
        at: 判定時刻。省略時はステージ実行時の現在時刻

    """

    def stage(original: Order, current: Order) -> Order:
        coupons = tuple(coupon for coupon in current.coupons if not coupon.is_expired(at))
        return current.with_changes(coupons=coupons)

    stage.__name__ = "drop_expired_coupons"
    return stage

