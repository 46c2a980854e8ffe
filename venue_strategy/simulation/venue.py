"""Simulated lending venue — shares priced by a stored exchange rate."""
from __future__ import annotations

import logging

from .. import accounting
from ..errors import ConfigurationError, InsufficientBalanceError, InvalidProofError
from ..ledger import InMemoryLedger
from . import merkle

logger = logging.getLogger(__name__)


class SimulatedVenue:
    """Lending venue whose own address doubles as its share token.

    Deposits mint ``amount * 10^18 / rate`` shares and redemptions pay
    ``shares * rate / 10^18`` underlying out of the venue's reserves, both
    rounded down in the venue's favour.
    """

    def __init__(
        self,
        address: str,
        underlying: str,
        ledger: InMemoryLedger,
        c_token: str = "",
        exchange_rate: int = accounting.PRECISION,
        reward_token: str = "",
    ) -> None:
        if not address or not underlying:
            raise ConfigurationError("Venue address and underlying are required")
        self._address = address
        self._underlying = underlying
        self._c_token = c_token
        self._ledger = ledger
        self._exchange_rate = exchange_rate
        self._reward_token = reward_token
        self._reward_root: bytes | None = None
        self._claimed: dict[str, int] = {}

    @property
    def address(self) -> str:
        return self._address

    def u_token(self) -> str:
        return self._underlying

    def c_token(self) -> str:
        return self._c_token

    def exchange_rate_stored(self) -> int:
        return self._exchange_rate

    def balance_of(self, account: str) -> int:
        return self._ledger.balance_of(self._address, account)

    def total_shares(self) -> int:
        return self._ledger.total_supply(self._address)

    def reserves(self) -> int:
        return self._ledger.balance_of(self._underlying, self._address)

    # ------------------------------------------------------------------
    # Rate management
    # ------------------------------------------------------------------

    def set_exchange_rate(self, exchange_rate: int) -> None:
        if exchange_rate <= 0:
            raise ValueError(f"Exchange rate must be positive, got {exchange_rate}")
        self._exchange_rate = exchange_rate

    def accrue(self, interest: int) -> None:
        """Add ``interest`` to reserves and reprice shares against them."""
        self._ledger.mint(self._underlying, self._address, interest)
        supply = self.total_shares()
        if supply:
            self._exchange_rate = self.reserves() * accounting.PRECISION // supply
        logger.debug("Venue %s rate now %d", self._address, self._exchange_rate)

    # ------------------------------------------------------------------
    # Deposits and redemptions
    # ------------------------------------------------------------------

    def deposit(self, account: str, amount: int) -> int:
        if amount <= 0:
            raise ValueError(f"Deposit amount must be positive, got {amount}")
        shares = amount * accounting.PRECISION // self._exchange_rate
        self._ledger.transfer(self._underlying, account, self._address, amount)
        self._ledger.mint(self._address, account, shares)
        return shares

    def withdraw(self, account: str, shares: int) -> int:
        if shares <= 0:
            raise ValueError(f"Share count must be positive, got {shares}")
        amount = accounting.underlying_from_shares(shares, self._exchange_rate)
        if amount > self.reserves():
            raise InsufficientBalanceError(
                f"Venue {self._address} holds {self.reserves()}, cannot pay {amount}"
            )
        self._ledger.burn(self._address, account, shares)
        self._ledger.transfer(self._underlying, self._address, account, amount)
        return amount

    # ------------------------------------------------------------------
    # Rewards
    # ------------------------------------------------------------------

    def set_reward_root(self, root: bytes) -> None:
        self._reward_root = root

    def claimed(self, account: str) -> int:
        return self._claimed.get(account, 0)

    def claim(self, account: str, total_reward: int, proof: list[bytes]) -> int:
        """Pay out ``total_reward`` minus what ``account`` already claimed."""
        if self._reward_root is None or not self._reward_token:
            raise InvalidProofError("No reward distribution is active")
        leaf = merkle.leaf_hash(account, total_reward)
        if not merkle.verify(proof, self._reward_root, leaf):
            raise InvalidProofError(f"Invalid reward proof for {account}")

        payout = total_reward - self.claimed(account)
        if payout <= 0:
            return 0
        self._ledger.transfer(self._reward_token, self._address, account, payout)
        self._claimed[account] = total_reward
        return payout
