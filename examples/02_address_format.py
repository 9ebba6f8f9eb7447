#!/usr/bin/env python3
"""
Example 02: Address format validation (offline).

Shows which inputs are accepted, and how a 63-digit address is padded
to the canonical 66-character form.

Usage:
    python examples/02_address_format.py
    python examples/02_address_format.py 0x4e49f15...
"""

import sys

from starknet_checker.core.address import AddressError, normalize_address, validate_address

addresses = [
    "0x04e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e",  # canonical
    "0x4e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e",  # one leading zero dropped
    "0x006a06ca686c6193a3420333405fe6bfb065197d670c645bdc0722a36d8892",  # two digits short
    "invalid_address_123",
]

if len(sys.argv) > 1:
    addresses = sys.argv[1:]

for addr in addresses:
    valid, canonical = normalize_address(addr)
    print(f"Address: {addr}")
    print(f"  Valid:     {valid}")
    if valid:
        print(f"  Canonical: {canonical}")
    else:
        try:
            validate_address(addr)
        except AddressError as e:
            print(f"  Reason:    {e}")
    print()
