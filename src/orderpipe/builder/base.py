"""AbstractPipeBuilder: ステージパイプラインを持つビルダーの基底クラス."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from orderpipe.builder.protocol import Stage

T = TypeVar("T")
B = TypeVar("B", bound="AbstractPipeBuilder[Any]")

logger = logging.getLogger(__name__)


class AbstractPipeBuilder(ABC, Generic[T]):
    """ステージパイプラインの基底実装.

    ``pipe()`` で登録したステージを、``build()`` 内で ``_execute_pipe()`` を呼んで
    登録順に畳み込む。具象クラスは ``build()`` で元になる値を組み立て、
    ``_execute_pipe()`` に渡す。

    Examples:
        >>> class ListBuilder(AbstractPipeBuilder[list]):
        ...     def build(self) -> list:
        ...         return self._execute_pipe([1, 2])
        >>> ListBuilder().pipe(lambda original, current: [*current, 3]).build()
        [1, 2, 3]

    """

    def __init__(self) -> None:
        self._stages: list[Stage[T]] = []

    @property
    def stages(self) -> tuple[Stage[T], ...]:
        """登録済みステージ（登録順）."""
        return tuple(self._stages)

    def pipe(self: B, *stages: Stage[Any]) -> B:
        """ステージを末尾に追加する.

        複数回呼んだ場合は置き換えではなく追記になる。

        Raises:
            TypeError: 呼び出し可能でない値が含まれる場合

        """
        for stage in stages:
            if not callable(stage):
                msg = f"Stage must be callable, got {stage!r}"
                raise TypeError(msg)
        self._stages.extend(stages)
        return self

    def clear_stages(self: B) -> B:
        """登録済みステージをすべて取り除く."""
        self._stages.clear()
        return self

    @abstractmethod
    def build(self) -> T:
        """値を組み立てる."""

    def _execute_pipe(self, source: T) -> T:
        """ステージを順に適用する.

        各ステージには変換前の ``source`` と直前までの結果を渡す。
        ステージが無ければ ``source`` をそのまま返す。
        """
        stages = self._pipeline()
        if not stages:
            return source

        current = source
        for index, stage in enumerate(stages):
            logger.debug("running stage %d: %s", index, getattr(stage, "__name__", stage))
            current = stage(source, current)
            self._check_stage_result(stage, current)
        return current

    def _pipeline(self) -> list[Stage[T]]:
        """実行するステージ列を返す（サブクラスで前後に差し込める）."""
        return list(self._stages)

    def _check_stage_result(self, stage: Stage[T], result: Any) -> None:
        """ステージの戻り値を検査するフック（デフォルトは何もしない）."""
