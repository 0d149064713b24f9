"""注文を構成する値オブジェクト."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class ProductLine:
    """注文内の商品明細."""

    name: str
    price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        """価格 × 数量."""
        return self.price * self.quantity


@dataclass(frozen=True)
class Coupon:
    """割引クーポン.

    ``discount`` は 0〜1 の割引率。``valid_till`` はデータとして保持するだけで、
    価格計算では参照しない。
    """

    code: str
    discount: float
    valid_till: datetime

    def is_expired(self, at: datetime | None = None) -> bool:
        """``at`` 時点で有効期限切れか判定する.

        Args:
            at: 判定時刻。省略時は現在時刻（valid_till が aware なら UTC）

        Returns:
            valid_till が at より前なら True

        """
        if at is None:
            at = datetime.now(timezone.utc) if self.valid_till.tzinfo else datetime.now()
        return self.valid_till < at


@dataclass(frozen=True)
class Address:
    """配送先住所（価格計算には関与しない）."""

    country: str
    city: str
    street: str
    house: str
    apartment: str
    state: str | None = None
