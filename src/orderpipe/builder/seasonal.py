"""SeasonalOrderBuilder: 名前付きステージ（季節割引・販促品）を持つビルダー."""

from __future__ import annotations

from typing import TypeVar

from orderpipe.builder.order_builder import OrderBuilder
from orderpipe.builder.protocol import Stage
from orderpipe.order import Order
from orderpipe.stages import promo_item, seasonal_offer

SB = TypeVar("SB", bound="SeasonalOrderBuilder")


class SeasonalOrderBuilder(OrderBuilder):
    """季節割引と販促品をトグルで指定できる OrderBuilder.

    - ``with_seasonal_offer()``: 全商品の価格を 0.8 倍にする
    - ``with_promo()``: 価格 0 の "Seat" を 1 つ追加する

    両方指定した場合は割引 → 販促品追加の順に適用するため、販促品は割引されない。
    トグルのステージは ``pipe()`` で登録したステージより先に実行される。
    トグルは何度呼んでも 1 回分として扱う。
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        super().__init__(strict=strict)
        self._seasonal_offer = False
        self._promo = False

    def with_seasonal_offer(self: SB) -> SB:
        self._seasonal_offer = True
        return self

    def with_promo(self: SB) -> SB:
        self._promo = True
        return self

    def _pipeline(self) -> list[Stage[Order]]:
        """トグルに対応するステージを先頭に差し込む."""
        toggles: list[Stage[Order]] = []
        if self._seasonal_offer:
            toggles.append(seasonal_offer)
        if self._promo:
            toggles.append(promo_item)
        return [*toggles, *super()._pipeline()]
