"""Order: 注文スナップショットと合計金額の計算."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from orderpipe.models import Address, Coupon, ProductLine


def base_cost(products: Iterable[ProductLine]) -> float:
    """割引前の金額（価格 × 数量の総和）を返す.

    0 から始めて、格納順に左から加算する。
    """
    total: float = 0
    for product in products:
        total += product.price * product.quantity
    return total


def compute_total_cost(products: Iterable[ProductLine], coupons: Iterable[Coupon]) -> float:
    """クーポン適用後の合計金額を返す.

    クーポンはリスト順に ``total * (1 - discount)`` を掛けていく（複利的に適用）。
    0.5 のクーポン 2 枚で元の 25% になる。

    Args:
        products: 商品明細
        coupons: クーポン

    Returns:
        合計金額。商品が空なら 0、クーポンが空なら割引前の金額

    """
    total = base_cost(products)
    for coupon in coupons:
        total *= 1 - coupon.discount
    return total


@dataclass(frozen=True)
class Order:
    """注文のイミュータブルなスナップショット.

    ``total_cost`` は生成時に即座に計算される。``products`` と ``coupons`` は
    呼び出し側のリストのコピー（tuple）として保持するため、生成後に元のリストを
    変更しても合計金額とずれることはない。

    このクラス自体はバリデーションを行わない（負の価格や範囲外の割引率も
    そのまま受け入れる）。厳格なチェックは :func:`orderpipe.validation.validate_order`
    を参照。
    """

    products: tuple[ProductLine, ...] = ()
    coupons: tuple[Coupon, ...] = ()
    username: str | None = None
    delivery_address: Address | None = None
    total_cost: float = field(init=False, default=0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products or ()))
        object.__setattr__(self, "coupons", tuple(self.coupons or ()))
        object.__setattr__(self, "total_cost", compute_total_cost(self.products, self.coupons))

    def with_changes(self, **changes: Any) -> Order:
        """一部のフィールドを差し替えた新しい Order を返す（合計金額は再計算される）."""
        return dataclasses.replace(self, **changes)


def create_order(
    products: Iterable[ProductLine] | None,
    coupons: Iterable[Coupon] | None,
    username: str | None,
    delivery_address: Address | None,
    *,
    strict: bool | None = None,
) -> Order:
    """ビルダーを使わずに Order を生成する.

    Args:
        products: 商品明細
        coupons: クーポン
        username: ユーザー名
        delivery_address: 配送先住所
        strict: True なら厳格バリデーションを行う。None の場合は
            ``config.STRICT_VALIDATION`` に従う

    Returns:
        合計金額計算済みの Order

    Raises:
        OrderValidationError: 厳格モードでバリデーションに失敗した場合

    """
    order = Order(
        tuple(products or ()),
        tuple(coupons or ()),
        username,
        delivery_address,
    )
    from orderpipe.validation import is_strict, validate_order

    if is_strict(strict):
        validate_order(order)
    return order
