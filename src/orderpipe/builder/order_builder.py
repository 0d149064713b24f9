"""OrderBuilder: 流れるようなインターフェースで Order を組み立てる."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from orderpipe.builder.base import AbstractPipeBuilder
from orderpipe.builder.protocol import Stage
from orderpipe.exceptions import StageError
from orderpipe.messages import get_message
from orderpipe.models import Address, Coupon, ProductLine
from orderpipe.order import Order
from orderpipe.validation import is_strict, validate_order

OB = TypeVar("OB", bound="OrderBuilder")

logger = logging.getLogger(__name__)


class OrderBuilder(AbstractPipeBuilder[Order]):
    """Order のビルダー.

    ``with_*`` は値を保持して自身を返す（後から呼んだ値が勝つ）。
    ``build()`` 後もフィールドとステージは残るため、一部を変えて再度
    ``build()`` すれば別の Order が得られる。

    未設定のフィールドはそのまま未設定の Order になる（商品・クーポンは空、
    ユーザー名・住所は None）。必須チェックは厳格モードでのみ行う。

    インスタンスは可変で、ロックを持たない。複数スレッドで共有する場合は
    呼び出し側で排他すること。

    Examples:
        >>> order = (
        ...     OrderBuilder()
        ...     .with_products([ProductLine("Bumper", 2, 10)])
        ...     .with_username("superuser177")
        ...     .build()
        ... )
        >>> order.total_cost
        20

    """

    def __init__(self, *, strict: bool | None = None) -> None:
        """初期化.

        Args:
            strict: True なら build() 時に厳格バリデーションを行う。
                None の場合は ``config.STRICT_VALIDATION`` に従う

        """
        super().__init__()
        self._strict = strict
        self._products: Sequence[ProductLine] | None = None
        self._coupons: Sequence[Coupon] | None = None
        self._username: str | None = None
        self._delivery_address: Address | None = None

    def with_products(self: OB, products: Sequence[ProductLine]) -> OB:
        self._products = products
        return self

    def with_coupons(self: OB, coupons: Sequence[Coupon]) -> OB:
        self._coupons = coupons
        return self

    def with_username(self: OB, username: str) -> OB:
        self._username = username
        return self

    def with_delivery_address(self: OB, address: Address) -> OB:
        self._delivery_address = address
        return self

    def build(self) -> Order:
        """Order を組み立てる.

        1. 現在のフィールドから元の Order を生成
        2. 登録済みステージを登録順に適用
        3. 厳格モードなら最終結果を検証

        Raises:
            StageError: ステージが Order 以外を返した場合
            OrderValidationError: 厳格モードで検証に失敗した場合

        """
        original = Order(
            tuple(self._products or ()),
            tuple(self._coupons or ()),
            self._username,
            self._delivery_address,
        )
        order = self._execute_pipe(original)
        if is_strict(self._strict):
            validate_order(order)
        logger.debug(
            "built order for %r: %d products, total_cost=%s",
            order.username,
            len(order.products),
            order.total_cost,
        )
        return order

    def _check_stage_result(self, stage: Stage[Order], result: Any) -> None:
        if not isinstance(result, Order):
            name = getattr(stage, "__name__", repr(stage))
            msg = f"{get_message('stage_result_type')}: stage={name} result={type(result).__name__}"
            raise StageError(msg, stage)
