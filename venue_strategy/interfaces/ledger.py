"""Token ledger protocol — balances and transfers of fungible tokens."""
from contextlib import AbstractContextManager
from typing import Protocol


class TokenLedger(Protocol):
    """Host ledger holding every token balance the strategy touches."""

    def balance_of(self, token: str, holder: str) -> int: ...

    def transfer(self, token: str, sender: str, recipient: str, amount: int) -> None: ...

    def atomic(self) -> AbstractContextManager[None]: ...
