"""Venue strategy — custody, accounting and recovery for one lending venue."""
from __future__ import annotations

import logging

from . import accounting
from .access import AccessGuard
from .errors import ConfigurationError, ProtectedAssetError
from .interfaces.fund import Fund
from .interfaces.ledger import TokenLedger
from .interfaces.venue import LendingVenue
from .models import PositionSnapshot, WithdrawalResult

logger = logging.getLogger(__name__)


class VenueStrategy:
    """Hold a fund's idle underlying and deploy it into a lending venue.

    Every mutating operation takes the ``caller`` identity explicitly and is
    authorized before it touches any balance. The body then runs inside
    ``ledger.atomic()`` so a failure half-way leaves no partial effects.
    """

    def __init__(
        self,
        address: str,
        fund: Fund | None,
        venue: LendingVenue | None,
        ledger: TokenLedger | None,
        creator: str = "",
    ) -> None:
        if not address:
            raise ConfigurationError("Strategy address is required")
        if fund is None:
            raise ConfigurationError("Fund is required")
        if venue is None:
            raise ConfigurationError("Venue is required")
        if ledger is None:
            raise ConfigurationError("Ledger is required")

        underlying = fund.underlying()
        venue_underlying = venue.u_token()
        if underlying != venue_underlying:
            raise ConfigurationError(
                f"Fund underlying {underlying} does not match venue underlying "
                f"{venue_underlying}"
            )

        self.address = address
        self.fund = fund
        self.venue = venue
        self.creator = creator
        self.underlying = underlying
        self.share_token = venue.address
        self.rate_token = venue.c_token()
        self.invest_activated = True

        self._ledger = ledger
        self._guard = AccessGuard(fund)
        self._protected = frozenset(
            t for t in (self.underlying, self.share_token, self.rate_token) if t
        )

        logger.info(
            "Strategy %s created for fund %s on venue %s (underlying %s)",
            address, fund.address, venue.address, underlying,
        )

    # ------------------------------------------------------------------
    # Accounting
    # ------------------------------------------------------------------

    @property
    def protected_tokens(self) -> frozenset[str]:
        """Tokens governance may never sweep."""
        return self._protected

    def is_protected(self, token: str) -> bool:
        """True when ``token`` is in the sweep denylist."""
        return token in self._protected

    def idle_balance(self) -> int:
        """Underlying held by the strategy and not yet deployed."""
        return self._ledger.balance_of(self.underlying, self.address)

    def shares_held(self) -> int:
        """Venue shares owned by the strategy."""
        return self.venue.balance_of(self.address)

    def invested_underlying_balance(self) -> int:
        """Venue position valued at the venue's current rate, plus idle balance."""
        return accounting.invested_underlying_balance(
            self.shares_held(), self.venue.exchange_rate_stored(), self.idle_balance()
        )

    def share_value_from_underlying(self, amount: int) -> int:
        """Shares to redeem for ``amount`` underlying at the current rate, rounded up."""
        return accounting.shares_from_underlying(
            amount, self.venue.exchange_rate_stored()
        )

    def deposit_arb_check(self) -> bool:
        """Arbitrage check run before deposits; accepts every deposit for now."""
        return True

    def snapshot(self, label: str = "", decimals: int = 18) -> PositionSnapshot:
        shares = self.shares_held()
        rate = self.venue.exchange_rate_stored()
        idle = self.idle_balance()
        return PositionSnapshot(
            shares=shares,
            exchange_rate=rate,
            idle_balance=idle,
            invested_balance=accounting.invested_underlying_balance(shares, rate, idle),
            decimals=decimals,
            label=label,
            strategy_address=self.address,
        )

    # ------------------------------------------------------------------
    # Custody
    # ------------------------------------------------------------------

    def _invest_all(self) -> int:
        if not self.invest_activated:
            logger.debug("Investing disabled, keeping idle balance in %s", self.address)
            return 0

        idle = self.idle_balance()
        if idle == 0:
            logger.debug("No idle balance to invest")
            return 0

        self.venue.deposit(self.address, idle)
        logger.info("Deposited %d into venue %s", idle, self.venue.address)
        return idle

    def _redeem(self, shares: int) -> int:
        """Redeem up to ``shares`` (clamped to holdings); returns underlying received."""
        shares = min(shares, self.shares_held())
        if shares <= 0:
            return 0
        received = self.venue.withdraw(self.address, shares)
        logger.info("Redeemed %d shares for %d underlying", shares, received)
        return received

    def _transfer_to_fund(self, amount: int) -> None:
        if amount > 0:
            self._ledger.transfer(
                self.underlying, self.address, self.fund.address, amount
            )
            logger.info("Transferred %d to fund %s", amount, self.fund.address)

    def do_hard_work(self, caller: str) -> int:
        """Deploy the whole idle balance into the venue."""
        self._guard.require_fund_or_governance(caller, "do_hard_work")
        with self._ledger.atomic():
            return self._invest_all()

    def withdraw_to_fund(self, caller: str, amount: int) -> WithdrawalResult:
        """Send ``amount`` underlying to the fund, redeeming shares if needed.

        Redemptions are capped at the shares held, so the fund may receive
        less than requested when the position cannot cover it.
        """
        self._guard.require_fund_or_governance(caller, "withdraw_to_fund")
        if amount < 0:
            raise ValueError(f"Withdrawal amount must be non-negative, got {amount}")

        with self._ledger.atomic():
            idle = self.idle_balance()
            if idle >= amount:
                self._transfer_to_fund(amount)
                return WithdrawalResult(
                    requested=amount, shares_redeemed=0, transferred=amount
                )

            shares_needed = self.share_value_from_underlying(amount - idle)
            shares_redeemed = min(shares_needed, self.shares_held())
            self._redeem(shares_redeemed)

            transferred = min(amount, self.idle_balance())
            self._transfer_to_fund(transferred)
            if transferred < amount:
                logger.warning(
                    "Requested %d but only %d was available", amount, transferred
                )
            return WithdrawalResult(
                requested=amount,
                shares_redeemed=shares_redeemed,
                transferred=transferred,
            )

    def withdraw_all_to_fund(self, caller: str) -> WithdrawalResult:
        """Exit the venue completely and send everything to the fund."""
        self._guard.require_fund_or_governance(caller, "withdraw_all_to_fund")
        with self._ledger.atomic():
            shares = self.shares_held()
            self._redeem(shares)
            balance = self.idle_balance()
            self._transfer_to_fund(balance)
            return WithdrawalResult(
                requested=balance, shares_redeemed=shares, transferred=balance
            )

    def withdraw_partial_shares(self, caller: str, shares: int) -> int:
        """Redeem ``shares`` and keep the proceeds idle in the strategy."""
        self._guard.require_fund_or_governance(caller, "withdraw_partial_shares")
        if shares < 0:
            raise ValueError(f"Share count must be non-negative, got {shares}")
        with self._ledger.atomic():
            return self._redeem(shares)

    # ------------------------------------------------------------------
    # Recovery and settings
    # ------------------------------------------------------------------

    def set_invest_activated(self, caller: str, activated: bool) -> None:
        self._guard.require_fund_or_governance(caller, "set_invest_activated")
        self.invest_activated = activated
        logger.info("Investing %s", "enabled" if activated else "disabled")

    def sweep(self, caller: str, token: str, recipient: str) -> int:
        """Send the strategy's whole balance of a stray ``token`` to ``recipient``."""
        self._guard.require_governance(caller, "sweep")
        if self.is_protected(token):
            raise ProtectedAssetError(f"Token {token} is not salvageable")

        with self._ledger.atomic():
            balance = self._ledger.balance_of(token, self.address)
            if balance > 0:
                self._ledger.transfer(token, self.address, recipient, balance)
                logger.info("Swept %d of %s to %s", balance, token, recipient)
            return balance

    def claim(self, caller: str, total_reward: int, proof: list[bytes]) -> int:
        """Forward a reward claim to the venue; the venue verifies ``proof``."""
        self._guard.require_fund_or_governance(caller, "claim")
        with self._ledger.atomic():
            claimed = self.venue.claim(self.address, total_reward, proof)
            logger.info("Claimed %d reward from venue %s", claimed, self.venue.address)
            return claimed
