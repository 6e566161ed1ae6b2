"""Unit conversion and contract call helpers."""

from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from eth_abi import decode, encode
from eth_utils import function_signature_to_4byte_selector


def parse_units(amount: str | int | float | Decimal, decimals: int) -> int:
    """Convert a human-readable amount (e.g. "1.5") to its smallest unit."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount}") from None
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount}")

    # Split on the decimal point to avoid Decimal context rounding
    text = format(value, "f")
    negative = text.startswith("-")
    whole, _, fraction = text.lstrip("-").partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) > decimals:
        raise ValueError(f"Amount {amount} has more than {decimals} decimals")

    result = int(whole or "0") * 10**decimals + int(fraction.ljust(decimals, "0") or "0")
    return -result if negative else result


def format_units(value: int, decimals: int) -> str:
    """Format a smallest-unit value with decimals, trimming trailing zeros."""
    divisor = 10**decimals
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), divisor)

    if fraction == 0:
        return f"{sign}{whole}"

    trimmed = str(fraction).zfill(decimals).rstrip("0")
    return f"{sign}{whole}.{trimmed}"


def apply_gas_multiplier(gas: int, multiplier: float) -> int:
    """Scale a gas value by a multiplier, rounding to the nearest integer."""
    return round(gas * multiplier)


def encode_function_call(signature: str, args: Sequence[Any] = ()) -> str:
    """
    ABI-encode a contract call.

    Args:
        signature: Canonical function signature, e.g. "transfer(address,uint256)"
        args: Positional arguments matching the signature types

    Returns:
        Hex calldata with 0x prefix
    """
    selector = function_signature_to_4byte_selector(signature)
    arg_types = _signature_types(signature)
    if len(arg_types) != len(args):
        raise ValueError(f"{signature} expects {len(arg_types)} arguments, got {len(args)}")
    return "0x" + (selector + encode(arg_types, list(args))).hex()


def decode_uint256(data: str) -> int:
    """Decode a single uint256 return value."""
    raw = bytes.fromhex(data.removeprefix("0x"))
    if not raw:
        raise ValueError("Empty return data")
    (value,) = decode(["uint256"], raw)
    return value


def _signature_types(signature: str) -> list[str]:
    inner = signature[signature.index("(") + 1 : signature.rindex(")")]
    return [t.strip() for t in inner.split(",") if t.strip()]
