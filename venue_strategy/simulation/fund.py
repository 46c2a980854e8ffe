"""Simulated fund — exposes the underlying asset and a rotatable governance."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class SimulatedFund:
    def __init__(self, address: str, underlying: str, governance: str) -> None:
        self._address = address
        self._underlying = underlying
        self._governance = governance

    @property
    def address(self) -> str:
        return self._address

    def underlying(self) -> str:
        return self._underlying

    def governance(self) -> str:
        return self._governance

    def set_governance(self, governance: str) -> None:
        logger.info("Fund %s governance rotated to %s", self._address, governance)
        self._governance = governance
