"""Unit tests for data models."""
from __future__ import annotations

import pytest

from venue_strategy.models import PositionSnapshot, WithdrawalResult


class TestPositionSnapshot:
    def test_human_amounts(self) -> None:
        snap = PositionSnapshot(
            shares=1000,
            exchange_rate=2 * 10**18,
            idle_balance=500_000,
            invested_balance=2_500_000,
            decimals=6,
        )
        assert snap.invested_amount == pytest.approx(2.5)
        assert snap.idle_amount == pytest.approx(0.5)

    def test_defaults(self) -> None:
        snap = PositionSnapshot(shares=0, exchange_rate=1, idle_balance=0, invested_balance=0)
        assert snap.decimals == 18
        assert snap.label == ""
        assert snap.block_number is None

    def test_frozen(self) -> None:
        snap = PositionSnapshot(shares=0, exchange_rate=1, idle_balance=0, invested_balance=0)
        with pytest.raises(AttributeError):
            snap.shares = 5  # type: ignore[misc]


class TestWithdrawalResult:
    def test_equality(self) -> None:
        assert WithdrawalResult(10, 5, 10) == WithdrawalResult(
            requested=10, shares_redeemed=5, transferred=10
        )
