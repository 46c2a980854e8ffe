"""Position reporting — values deployed strategies from on-chain reads."""
from __future__ import annotations

import asyncio
import logging

from .. import accounting
from ..chains.evm import abi
from ..config import AppConfig, StrategyConfig
from ..interfaces.chain import ChainClient
from ..models import PositionSnapshot

logger = logging.getLogger(__name__)


class PositionReporter:
    """Read share balances and venue rates and value each configured strategy."""

    def __init__(self, config: AppConfig, client: ChainClient) -> None:
        self._config = config
        self._client = client

    async def _call(self, to: str, block: str, function: str, *args: str) -> int:
        data = abi.encode_call(function, *args)
        return abi.decode_result(function, await self._client.eth_call(to, data, block))

    async def fetch_snapshot(self, strategy: StrategyConfig) -> PositionSnapshot:
        """Value one strategy; all reads are pinned to the same block."""
        block_number = await self._client.block_number()
        block = hex(block_number)

        shares, exchange_rate, idle = await asyncio.gather(
            self._call(strategy.venue, block, "balanceOf", strategy.address),
            self._call(strategy.venue, block, "exchangeRateStored"),
            self._call(strategy.underlying, block, "balanceOf", strategy.address),
        )

        return PositionSnapshot(
            shares=shares,
            exchange_rate=exchange_rate,
            idle_balance=idle,
            invested_balance=accounting.invested_underlying_balance(
                shares, exchange_rate, idle
            ),
            decimals=strategy.decimals,
            label=strategy.label,
            strategy_address=strategy.address,
            block_number=block_number,
        )

    async def report(self) -> list[PositionSnapshot]:
        """Fetch and log a snapshot for every configured strategy."""
        snapshots: list[PositionSnapshot] = []
        for strategy in self._config.strategies:
            try:
                snapshot = await self.fetch_snapshot(strategy)
            except (RuntimeError, ValueError) as e:
                logger.error("Could not value strategy '%s': %s", strategy.label, e)
                continue

            logger.info(
                "%s · block %d · invested %.6f %s (idle %.6f) · %d shares @ %d",
                strategy.label,
                snapshot.block_number,
                snapshot.invested_amount,
                strategy.symbol,
                snapshot.idle_amount,
                snapshot.shares,
                snapshot.exchange_rate,
            )
            snapshots.append(snapshot)
        return snapshots

    async def run_continuous(self, check_interval_minutes: int | None = None) -> None:
        """Run continuous reporting loop."""
        interval = check_interval_minutes or self._config.monitor.check_interval_minutes
        logger.info("Starting continuous reporting (every %d minutes)", interval)

        while True:
            try:
                await self.report()
                await asyncio.sleep(interval * 60)
            except Exception as e:
                logger.error("Error in reporting loop: %s", e)
                await asyncio.sleep(60)
