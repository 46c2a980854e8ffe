"""Access guard — gates every mutating strategy operation."""
from __future__ import annotations

import logging

from .errors import AuthorizationError
from .interfaces.fund import Fund

logger = logging.getLogger(__name__)


class AccessGuard:
    """Authorize callers against the fund and its current governance.

    Governance is read from the fund on every check so a rotation takes
    effect on the very next call.
    """

    def __init__(self, fund: Fund) -> None:
        self._fund = fund

    def is_governance(self, caller: str) -> bool:
        return caller == self._fund.governance()

    def is_fund_or_governance(self, caller: str) -> bool:
        return caller == self._fund.address or self.is_governance(caller)

    def require_fund_or_governance(self, caller: str, action: str = "") -> None:
        if not self.is_fund_or_governance(caller):
            logger.warning("Rejected %s from %s: not fund or governance", action, caller)
            raise AuthorizationError(
                f"{caller} is neither the fund nor governance"
            )

    def require_governance(self, caller: str, action: str = "") -> None:
        if not self.is_governance(caller):
            logger.warning("Rejected %s from %s: not governance", action, caller)
            raise AuthorizationError(f"{caller} is not governance")
