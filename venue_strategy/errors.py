"""Exception hierarchy for strategy operations."""
from __future__ import annotations


class StrategyError(Exception):
    """Base error for every rejected strategy operation."""


class ConfigurationError(StrategyError):
    """Raised when collaborators are missing or disagree on the managed asset."""


class AuthorizationError(StrategyError):
    """Raised when the caller is not allowed to invoke an operation."""


class ProtectedAssetError(StrategyError):
    """Raised when governance tries to sweep a token the strategy manages."""


class InsufficientBalanceError(StrategyError):
    """Raised by the ledger when a holder moves more than it owns."""


class InvalidProofError(StrategyError):
    """Raised by a venue when a reward claim does not verify."""
