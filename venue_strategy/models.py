"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PositionSnapshot:
    """Point-in-time valuation of a strategy's position (raw base units)."""

    shares: int
    exchange_rate: int
    idle_balance: int
    invested_balance: int
    decimals: int = 18
    label: str = ""
    strategy_address: str = ""
    block_number: int | None = None

    @property
    def invested_amount(self) -> float:
        return self.invested_balance / (10**self.decimals)

    @property
    def idle_amount(self) -> float:
        return self.idle_balance / (10**self.decimals)


@dataclass(frozen=True)
class WithdrawalResult:
    """Outcome of a withdrawal towards the fund."""

    requested: int
    shares_redeemed: int
    transferred: int
