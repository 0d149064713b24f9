"""ステージとパイプビルダーのプロトコル定義."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from orderpipe.order import Order

T = TypeVar("T")

Stage = Callable[[T, T], T]
"""``(original, current) -> new`` の変換関数.

``original`` は変換前の値（全ステージで共通）、``current`` は直前のステージの結果。
どちらも読み取り専用として扱い、新しい値を返すこと。
"""

OrderStage = Callable[[Order, Order], Order]
"""Order 用のステージ."""


@runtime_checkable
class PipeBuilder(Protocol[T]):
    """ステージを積んで値を組み立てるビルダーのインターフェース."""

    def pipe(self, *stages: Callable[[Any, Any], Any]) -> PipeBuilder[T]:
        """ステージを末尾に追加する."""
        ...

    def build(self) -> T:
        """値を組み立てる."""
        ...
