"""EVM JSON-RPC access."""
from .client import EvmClient

__all__ = ["EvmClient"]
