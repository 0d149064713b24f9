"""orderpipe 例外クラス."""

from __future__ import annotations

from typing import Any


class OrderpipeError(Exception):
    """orderpipe の基底例外."""


class OrderValidationError(OrderpipeError):
    """厳格モードでの注文バリデーションエラー."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class StageError(OrderpipeError):
    """ステージが Order 以外の値を返した."""

    def __init__(self, message: str, stage: Any = None) -> None:
        super().__init__(message)
        self.stage = stage
