"""値オブジェクトのテスト."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from orderpipe.models import Address, Coupon, ProductLine


class TestProductLine:
    """ProductLine の基本動作."""

    def test_subtotal(self) -> None:
        """価格 × 数量を返す."""
        assert ProductLine("Bumper", 2, 10).subtotal == 20

    def test_frozen(self) -> None:
        """生成後は変更できない."""
        line = ProductLine("Bumper", 2, 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.price = 3  # type: ignore[misc]

    def test_negative_values_accepted(self) -> None:
        """負の値も拒否しない."""
        line = ProductLine("Refund", -5, 2)
        assert line.subtotal == -10


class TestCouponExpiry:
    """Coupon.is_expired の判定."""

    def test_not_expired(self) -> None:
        """期限前なら False."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        coupon = Coupon("TEAL", 0.15, now + timedelta(days=1))
        assert coupon.is_expired(now) is False

    def test_expired(self) -> None:
        """期限後なら True."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        coupon = Coupon("TEAL", 0.15, now - timedelta(seconds=1))
        assert coupon.is_expired(now) is True

    def test_default_now_aware(self) -> None:
        """aware な valid_till は UTC の現在時刻と比較する."""
        coupon = Coupon("OLD", 0.1, datetime(2000, 1, 1, tzinfo=timezone.utc))
        assert coupon.is_expired() is True

    def test_default_now_naive(self) -> None:
        """naive な valid_till はローカルの現在時刻と比較する."""
        coupon = Coupon("NEW", 0.1, datetime(9999, 1, 1))
        assert coupon.is_expired() is False


class TestAddress:
    """Address の基本動作."""

    def test_state_optional(self) -> None:
        """State は省略できる."""
        address = Address("Armenia", "Yerevan", "Bagramian", "1", "2")
        assert address.state is None

    def test_equality_by_value(self) -> None:
        """値で比較される."""
        a = Address("US", "Austin", "Main", "1", "2", state="TX")
        b = Address("US", "Austin", "Main", "1", "2", state="TX")
        assert a == b
