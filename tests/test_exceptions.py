"""例外クラスのテスト."""

import pytest

from orderpipe.exceptions import OrderpipeError, OrderValidationError, StageError


class TestExceptionHierarchy:
    """例外クラスの継承関係を検証する."""

    def test_orderpipe_error_is_exception(self) -> None:
        assert issubclass(OrderpipeError, Exception)

    def test_validation_error_is_orderpipe_error(self) -> None:
        assert issubclass(OrderValidationError, OrderpipeError)

    def test_stage_error_is_orderpipe_error(self) -> None:
        assert issubclass(StageError, OrderpipeError)


class TestExceptionCatch:
    """基底例外で子例外をキャッチできることを検証する."""

    def test_catch_validation_error(self) -> None:
        with pytest.raises(OrderpipeError):
            raise OrderValidationError("invalid")

    def test_catch_stage_error(self) -> None:
        with pytest.raises(OrderpipeError):
            raise StageError("bad stage")


class TestExceptionAttributes:
    """例外が保持する情報を検証する."""

    def test_validation_error_message_and_errors(self) -> None:
        err = OrderValidationError("invalid", ["username: empty"])
        assert str(err) == "invalid"
        assert err.errors == ["username: empty"]

    def test_validation_error_default_errors(self) -> None:
        assert OrderValidationError("invalid").errors == []

    def test_stage_error_keeps_stage(self) -> None:
        def stage(original: object, current: object) -> object:
            return current

        err = StageError("bad stage", stage)
        assert err.stage is stage
        assert str(err) == "bad stage"
