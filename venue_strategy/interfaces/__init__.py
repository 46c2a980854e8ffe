"""Protocol interfaces for the strategy's collaborators."""
from .chain import ChainClient
from .fund import Fund
from .ledger import TokenLedger
from .venue import LendingVenue

__all__ = ["ChainClient", "Fund", "LendingVenue", "TokenLedger"]
