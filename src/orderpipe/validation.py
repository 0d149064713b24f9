"""厳格モード用の注文バリデーション（Pydantic スキーマ）.

デフォルトでは Order は何も検証しない。``config.STRICT_VALIDATION`` または
``strict=True`` を明示した場合にのみ、ここで定義するスキーマで検証する。
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, ValidationError, field_validator

from orderpipe import config
from orderpipe.exceptions import OrderValidationError
from orderpipe.messages import get_message
from orderpipe.models import Address

if TYPE_CHECKING:
    from orderpipe.order import Order

logger = logging.getLogger(__name__)

# フィールド名 → メッセージキー
_FIELD_MESSAGE_KEYS = {
    "price": "negative_price",
    "quantity": "negative_quantity",
    "discount": "discount_out_of_range",
    "code": "empty_coupon_code",
    "coupons": "duplicate_coupon_code",
    "username": "empty_username",
    "delivery_address": "missing_address",
}

# メッセージテーブルに置き換えるエラー種別
_CONSTRAINT_ERROR_TYPES = frozenset(
    {
        "greater_than_equal",
        "less_than_equal",
        "string_too_short",
        "string_type",
        "is_instance_of",
        "dataclass_type",
        "value_error",
    }
)


class ProductLineSchema(BaseModel):
    """商品明細スキーマ."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)


class CouponSchema(BaseModel):
    """クーポンスキーマ."""

    model_config = ConfigDict(from_attributes=True)

    code: str = Field(min_length=1)
    discount: float = Field(ge=0, le=1)
    valid_till: datetime


class OrderSchema(BaseModel):
    """注文スキーマ（住所の中身は検証しない）."""

    model_config = ConfigDict(from_attributes=True)

    products: list[ProductLineSchema]
    coupons: list[CouponSchema]
    username: str = Field(min_length=1)
    delivery_address: InstanceOf[Address]

    @field_validator("coupons")
    @classmethod
    def _unique_codes(cls, coupons: list[CouponSchema]) -> list[CouponSchema]:
        codes = [coupon.code for coupon in coupons]
        if len(codes) != len(set(codes)):
            msg = "duplicate coupon code"
            raise ValueError(msg)
        return coupons


def is_strict(strict: bool | None) -> bool:
    """引数指定があればそれを、なければ ``config.STRICT_VALIDATION`` を返す."""
    if strict is None:
        return config.STRICT_VALIDATION
    return strict


def validate_order(order: Order) -> Order:
    """Order を厳格ルールで検証する.

    以下を拒否する:
    - 負の価格・数量
    - 0〜1 の範囲外の割引率
    - 空のクーポンコード、重複したクーポンコード
    - 空または未指定のユーザー名
    - 未指定の配送先住所

    Args:
        order: 検証対象

    Returns:
        検証済みの order（そのまま）

    Raises:
        OrderValidationError: 違反がある場合

    """
    try:
        OrderSchema.model_validate(order, from_attributes=True)
    except ValidationError as exc:
        errors = [_describe(error) for error in exc.errors()]
        logger.debug("order rejected by strict validation: %s", errors)
        msg = f"{get_message('invalid_order')}: {'; '.join(errors)}"
        if config.ERROR_INCLUDE_ORDER:
            msg = f"{msg} username='{order.username}'"
        raise OrderValidationError(msg, errors) from exc
    return order


def _describe(error: Any) -> str:
    """Pydantic のエラー 1 件を ``loc: message`` 形式に変換する."""
    loc = error["loc"]
    location = ".".join(str(part) for part in loc)
    field_names = [part for part in loc if isinstance(part, str)]
    key = _FIELD_MESSAGE_KEYS.get(field_names[-1]) if field_names else None
    if key is not None and error["type"] in _CONSTRAINT_ERROR_TYPES:
        return f"{location}: {get_message(key)}"
    return f"{location}: {error['msg']}"
