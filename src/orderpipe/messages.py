"""エラーメッセージの多言語テーブル."""

from __future__ import annotations

from orderpipe import config

_MESSAGES: dict[str, dict[str, str]] = {
    "ja": {
        "invalid_order": "注文のバリデーションに失敗しました",
        "negative_price": "価格が負の値です",
        "negative_quantity": "数量が負の値です",
        "discount_out_of_range": "割引率が 0〜1 の範囲外です",
        "empty_coupon_code": "クーポンコードが空です",
        "duplicate_coupon_code": "クーポンコードが重複しています",
        "empty_username": "ユーザー名が指定されていません",
        "missing_address": "配送先住所が指定されていません",
        "stage_result_type": "ステージが Order 以外の値を返しました",
    },
    "en": {
        "invalid_order": "Order validation failed",
        "negative_price": "Price must not be negative",
        "negative_quantity": "Quantity must not be negative",
        "discount_out_of_range": "Discount must be within 0 and 1",
        "empty_coupon_code": "Coupon code is empty",
        "duplicate_coupon_code": "Coupon code is duplicated",
        "empty_username": "Username is required",
        "missing_address": "Delivery address is required",
        "stage_result_type": "Stage returned a value that is not an Order",
    },
}


def get_message(key: str) -> str:
    """設定言語のメッセージを返す.

    未知の言語は ja にフォールバックし、未知のキーはキー文字列をそのまま返す。
    """
    table = _MESSAGES.get(config.ERROR_MESSAGE_LANGUAGE, _MESSAGES["ja"])
    return table.get(key, key)
