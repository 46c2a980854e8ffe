"""Lending venue protocol — issues redeemable shares against deposits."""
from typing import Protocol


class LendingVenue(Protocol):
    """External venue the strategy deposits into.

    The venue is also the share token: ``balance_of`` reports shares and
    ``address`` is the share token identity.
    """

    @property
    def address(self) -> str: ...

    def u_token(self) -> str: ...

    def c_token(self) -> str: ...

    def deposit(self, account: str, amount: int) -> int: ...

    def withdraw(self, account: str, shares: int) -> int: ...

    def balance_of(self, account: str) -> int: ...

    def exchange_rate_stored(self) -> int: ...

    def claim(self, account: str, total_reward: int, proof: list[bytes]) -> int: ...
