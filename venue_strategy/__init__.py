"""Custodial strategy parking a fund's idle assets in a lending venue."""
from .errors import (
    AuthorizationError,
    ConfigurationError,
    InsufficientBalanceError,
    InvalidProofError,
    ProtectedAssetError,
    StrategyError,
)
from .ledger import InMemoryLedger
from .models import PositionSnapshot, WithdrawalResult
from .strategy import VenueStrategy

__all__ = [
    "AuthorizationError",
    "ConfigurationError",
    "InMemoryLedger",
    "InsufficientBalanceError",
    "InvalidProofError",
    "PositionSnapshot",
    "ProtectedAssetError",
    "StrategyError",
    "VenueStrategy",
    "WithdrawalResult",
]
