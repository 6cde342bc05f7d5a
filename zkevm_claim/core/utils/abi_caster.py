"""Casting of bridge API JSON values to Solidity ABI types.

The bridge service returns numbers as JSON numbers or decimal strings and
byte strings as ``0x``-prefixed hex.  ``eth_abi`` is strict about Python
types, so every value is normalised here before encoding.
"""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_checksum_address

_UINT_RE = re.compile(r"^uint(\d*)$")
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$")
_ARRAY_RE = re.compile(r"^(.+)\[(\d*)\]$")


def _to_int(arg: Any) -> int:
    if isinstance(arg, bool):
        raise TypeError("Expected integer, got bool")
    if isinstance(arg, int):
        return arg
    s = str(arg).strip()
    if s.lower().startswith("0x"):
        return int(s, 16)
    return int(s)


def _to_bytes(arg: Any) -> bytes:
    if isinstance(arg, bytes):
        return arg
    s = str(arg).strip()
    if s.lower().startswith("0x"):
        s = s[2:]
    return bytes.fromhex(s)


def cast_single(arg: Any, abi_type: str) -> Any:
    """Cast a single JSON value to its Solidity ABI type."""
    t = abi_type.strip()

    if m := _UINT_RE.match(t):
        bits = int(m.group(1) or 256)
        value = _to_int(arg)
        if value < 0 or value >= 2**bits:
            raise ValueError(f"Value {value} out of range for {t}")
        return value

    if t == "address":
        return to_checksum_address(str(arg))

    if t == "bytes":
        return _to_bytes(arg)

    if m := _FIXED_BYTES_RE.match(t):
        size = int(m.group(1))
        value = _to_bytes(arg)
        if len(value) != size:
            raise ValueError(f"Expected {size} bytes for {t}, got {len(value)}")
        return value

    raise ValueError(f"Unsupported ABI type: {t}")


def cast_value(arg: Any, abi_type: str) -> Any:
    t = abi_type.strip()

    # Array types: e.g. "bytes32[32]", "uint256[]"
    if m := _ARRAY_RE.match(t):
        element_type, length = m.group(1), m.group(2)
        if not isinstance(arg, (list, tuple)):
            raise TypeError(f"Expected list for {t}, got {type(arg).__name__}")
        if length and len(arg) != int(length):
            raise ValueError(f"Expected {length} items for {t}, got {len(arg)}")
        return [cast_value(item, element_type) for item in arg]

    return cast_single(arg, t)


def cast_args(args: list[Any], abi_inputs: list[dict[str, Any]]) -> list[Any]:
    """Cast a list of arguments to match ABI input definitions.

    Each entry in *abi_inputs* must have at least ``"type"``.
    """
    if len(args) != len(abi_inputs):
        raise ValueError(
            f"Argument count mismatch: got {len(args)}, expected {len(abi_inputs)}"
        )

    return [
        cast_value(arg, inp.get("type", ""))
        for arg, inp in zip(args, abi_inputs, strict=True)
    ]
