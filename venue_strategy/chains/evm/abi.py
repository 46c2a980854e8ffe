"""ABI helpers for the venue and token calls the reporter makes — no I/O."""
from __future__ import annotations

from typing import Any

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex, encode_hex, function_signature_to_4byte_selector, to_checksum_address

# --- Lending venue / ERC-20 read surface ---
VENUE_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "exchangeRateStored",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

_FUNCTIONS = {entry["name"]: entry for entry in VENUE_ABI}


def _function(name: str) -> dict[str, Any]:
    try:
        return _FUNCTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown function: {name}") from None


def _types(params: list[dict[str, Any]]) -> list[str]:
    return [p["type"] for p in params]


def selector(name: str) -> str:
    """4-byte selector as hex, e.g. ``selector("balanceOf") == "0x70a08231"``."""
    fn = _function(name)
    signature = f"{name}({','.join(_types(fn['inputs']))})"
    return encode_hex(function_signature_to_4byte_selector(signature))


def encode_call(name: str, *args: Any) -> str:
    """Build calldata for ``name``; address arguments may use any case."""
    input_types = _types(_function(name)["inputs"])
    if len(args) != len(input_types):
        raise ValueError(f"{name} takes {len(input_types)} arguments, got {len(args)}")
    values = [
        to_checksum_address(arg) if typ == "address" else arg
        for typ, arg in zip(input_types, args)
    ]
    return selector(name) + encode(input_types, values).hex()


def decode_result(name: str, data: str) -> Any:
    """Decode the single return value of ``name`` from raw hex output."""
    output_types = _types(_function(name)["outputs"])
    try:
        (value,) = decode(output_types, decode_hex(data))
    except DecodingError as e:
        raise ValueError(f"Cannot decode {name} result {data!r}: {e}") from e
    return value
