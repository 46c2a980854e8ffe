"""In-memory token ledger with all-or-nothing transactions."""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager

from .errors import InsufficientBalanceError

logger = logging.getLogger(__name__)


class InMemoryLedger:
    """Balances of every token keyed by ``(token, holder)``.

    ``atomic()`` snapshots all balances and restores them if the wrapped
    block raises, which gives each strategy call revert semantics.
    """

    def __init__(self) -> None:
        self._balances: dict[str, dict[str, int]] = defaultdict(dict)

    def balance_of(self, token: str, holder: str) -> int:
        return self._balances.get(token, {}).get(holder, 0)

    def total_supply(self, token: str) -> int:
        return sum(self._balances.get(token, {}).values())

    def mint(self, token: str, holder: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot mint a negative amount: {amount}")
        self._balances[token][holder] = self.balance_of(token, holder) + amount

    def burn(self, token: str, holder: str, amount: int) -> None:
        balance = self.balance_of(token, holder)
        if amount < 0:
            raise ValueError(f"Cannot burn a negative amount: {amount}")
        if amount > balance:
            raise InsufficientBalanceError(
                f"{holder} holds {balance} of {token}, cannot burn {amount}"
            )
        self._balances[token][holder] = balance - amount

    def transfer(self, token: str, sender: str, recipient: str, amount: int) -> None:
        self.burn(token, sender, amount)
        self.mint(token, recipient, amount)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        saved = {token: dict(holders) for token, holders in self._balances.items()}
        try:
            yield
        except Exception:
            logger.debug("Reverting ledger to pre-call balances")
            self._balances = defaultdict(dict, saved)
            raise
