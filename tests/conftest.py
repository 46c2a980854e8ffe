"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from dataclasses import dataclass
from pathlib import Path

import pytest

from venue_strategy.accounting import PRECISION
from venue_strategy.config import (
    AppConfig,
    ChainConfig,
    MonitorConfig,
    StrategyConfig,
)
from venue_strategy.ledger import InMemoryLedger
from venue_strategy.simulation import SimulatedFund, SimulatedVenue
from venue_strategy.strategy import VenueStrategy


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Accounts:
    strategy: str = "0x" + "51" * 20
    fund: str = "0x" + "f0" * 20
    governance: str = "0x" + "90" * 20
    creator: str = "0x" + "c0" * 20
    stranger: str = "0x" + "5e" * 20
    venue: str = "0x" + "7e" * 20
    c_token: str = "0x" + "ce" * 20
    underlying: str = "0x" + "a0" * 20
    reward: str = "0x" + "8e" * 20
    stray: str = "0x" + "dd" * 20


@pytest.fixture()
def accounts() -> Accounts:
    return Accounts()


# ---------------------------------------------------------------------------
# Simulated environment
# ---------------------------------------------------------------------------


@pytest.fixture()
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture()
def fund(accounts: Accounts) -> SimulatedFund:
    return SimulatedFund(accounts.fund, accounts.underlying, accounts.governance)


@pytest.fixture()
def venue(accounts: Accounts, ledger: InMemoryLedger) -> SimulatedVenue:
    return SimulatedVenue(
        accounts.venue,
        accounts.underlying,
        ledger,
        c_token=accounts.c_token,
        exchange_rate=PRECISION,
        reward_token=accounts.reward,
    )


@pytest.fixture()
def strategy(
    accounts: Accounts,
    fund: SimulatedFund,
    venue: SimulatedVenue,
    ledger: InMemoryLedger,
) -> VenueStrategy:
    return VenueStrategy(
        accounts.strategy, fund, venue, ledger, creator=accounts.creator
    )


@pytest.fixture()
def invested_strategy(
    strategy: VenueStrategy,
    venue: SimulatedVenue,
    ledger: InMemoryLedger,
    accounts: Accounts,
) -> VenueStrategy:
    """Strategy holding 1000 shares at a rate of 2.0 and no idle balance."""
    venue.set_exchange_rate(2 * PRECISION)
    ledger.mint(accounts.underlying, accounts.strategy, 2000)
    strategy.do_hard_work(accounts.fund)
    return strategy


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_strategy_config() -> StrategyConfig:
    return StrategyConfig(
        label="usdc-venue",
        address="0x" + "51" * 20,
        underlying="0x" + "a0" * 20,
        venue="0x" + "7e" * 20,
        decimals=6,
        symbol="USDC",
    )


@pytest.fixture()
def sample_app_config(sample_strategy_config: StrategyConfig) -> AppConfig:
    return AppConfig(
        monitor=MonitorConfig(check_interval_minutes=5),
        chain=ChainConfig(
            rpc_endpoints=("https://rpc1.example.com", "https://rpc2.example.com"),
            rpc_timeout=10,
        ),
        strategies=(sample_strategy_config,),
    )


SAMPLE_YAML = textwrap.dedent("""\
    monitor:
      check_interval_minutes: 5
    chain:
      rpc_endpoints: ["https://rpc.example.com"]
      rpc_timeout: 10
    strategies:
      - label: usdc-venue
        address: "0x5151515151515151515151515151515151515151"
        underlying: "0xa0a0a0a0a0a0a0a0a0a0a0a0a0a0a0a0a0a0a0a0"
        venue: "0x7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e7e"
        decimals: 6
        symbol: USDC
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
