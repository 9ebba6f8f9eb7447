#!/usr/bin/env python3
"""
Example 03: Reuse one node client for several checks.

Checks run one after another; the AddressChecker and its HTTP client
are shared between them.

Usage:
    python examples/03_classify_many.py [rpc_url]
"""

import sys

from starknet_checker import AddressChecker, GatewayError, StarknetNode
from starknet_checker.core.node import SEPOLIA_RPC_URL

rpc_url = sys.argv[1] if len(sys.argv) > 1 else SEPOLIA_RPC_URL

addresses = [
    "0x04e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e",
    "0x06eC96291A904b8B62B446FB32fC9903b5f82D73D7CA319E03ba45D50788Ec30",
    "0x01729ce1AD61551F08A1A5d4A8a0d3753de028b26b229FF021Ad8a9D3c1c29C9",
    "not-an-address",
]

with StarknetNode(rpc_url) as node:
    checker = AddressChecker(node)
    for addr in addresses:
        try:
            result = checker.check(addr)
            print(f"{addr[:20]}...  {result.summary()}")
        except GatewayError as e:
            print(f"{addr[:20]}...  error: {e}")
