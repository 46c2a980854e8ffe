"""Pure share/underlying conversion functions — no I/O.

The venue quotes its exchange rate scaled by ``PRECISION``:
    underlying = shares * exchange_rate / 10^18
"""
from __future__ import annotations

PRECISION = 10**18


def underlying_from_shares(shares: int, exchange_rate: int) -> int:
    """Value of ``shares`` in underlying units, rounded down."""
    return shares * exchange_rate // PRECISION


def shares_from_underlying(amount: int, exchange_rate: int) -> int:
    """Shares needed to obtain ``amount`` underlying, rounded up.

    Rounding up means a redemption sized by this function yields at least
    ``amount`` whenever enough shares are held:

        shares_from_underlying(500, 2 * 10**18) == 250
        shares_from_underlying(1, 3 * 10**18) == 1
    """
    if exchange_rate <= 0:
        raise ValueError(f"Exchange rate must be positive, got {exchange_rate}")
    if amount <= 0:
        return 0
    return -(-amount * PRECISION // exchange_rate)


def invested_underlying_balance(
    shares: int, exchange_rate: int, idle_balance: int
) -> int:
    """Total value managed: venue position plus idle underlying."""
    return underlying_from_shares(shares, exchange_rate) + idle_balance
