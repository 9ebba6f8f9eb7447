"""
Starknet address utilities: format validation, normalization, felt conversion.

A Starknet address is a field element (felt) below the STARK prime,
written as 0x + 64 hex digits (32 bytes, zero-padded on the left).

Many wallets and explorers drop a single leading zero and print 63 digits.
Those are accepted and padded back to the canonical 66-character form;
anything else is rejected.

Reference: https://docs.starknet.io/architecture-and-concepts/smart-contracts/contract-address/
"""

from __future__ import annotations

import re

# STARK field prime: 2^251 + 17 * 2^192 + 1
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

ADDRESS_HEX_LENGTH = 64
ADDRESS_LENGTH = ADDRESS_HEX_LENGTH + 2  # with "0x"

_CANONICAL_RE = re.compile(r"0x[0-9a-fA-F]{64}")
_SHORT_BY_ONE_RE = re.compile(r"0x[0-9a-fA-F]{63}")


class AddressError(ValueError):
    """Raised for malformed Starknet addresses."""

    pass


def normalize_address(address: str) -> tuple[bool, str]:
    """
    Validate an address and return its canonical 66-character form.

    Never raises. On failure the original input is returned untouched so
    the caller can report exactly what it was given.

    Returns:
        (True, canonical) for 0x + 64 hex digits (returned as-is) or
        0x + 63 hex digits (padded with one leading zero),
        (False, address) for everything else.
    """
    if not isinstance(address, str):
        return False, address

    if _CANONICAL_RE.fullmatch(address):
        return True, address

    if _SHORT_BY_ONE_RE.fullmatch(address):
        return True, "0x0" + address[2:]

    return False, address


def is_valid_address(address: str) -> bool:
    """Check the address format without raising."""
    return normalize_address(address)[0]


def validate_address(address: str) -> str:
    """
    Validate a Starknet address and return its canonical form.

    Args:
        address: 0x-prefixed hex string

    Returns:
        str: canonical 66-character address

    Raises:
        AddressError: with the reason the address was rejected
    """
    if not isinstance(address, str):
        raise AddressError(f"Address must be a string, got {type(address).__name__}")

    valid, canonical = normalize_address(address)
    if valid:
        return canonical

    if not address.startswith("0x"):
        raise AddressError(f"Address must start with '0x': {address!r}")

    digits = address[2:]
    if any(c not in "0123456789abcdefABCDEF" for c in digits):
        raise AddressError(f"Address contains non-hex characters: {address!r}")

    raise AddressError(
        f"Address has {len(digits)} hex digits, expected {ADDRESS_HEX_LENGTH} "
        f"(or {ADDRESS_HEX_LENGTH - 1} with a dropped leading zero)"
    )


def address_to_felt(address: str) -> int:
    """Parse a validated address into its integer field element."""
    value = int(validate_address(address), 16)
    if value >= FIELD_PRIME:
        raise AddressError(f"Address is not a valid field element: {address}")
    return value


def felt_to_address(value: int) -> str:
    """Format a field element as a canonical lower-case address."""
    if value < 0 or value >= FIELD_PRIME:
        raise AddressError(f"Value out of field range: {value}")
    return f"0x{value:0{ADDRESS_HEX_LENGTH}x}"
