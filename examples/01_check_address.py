#!/usr/bin/env python3
"""
Example 01: Is this address a smart wallet or a smart contract?

Usage:
    python examples/01_check_address.py
    python examples/01_check_address.py 0x04e49f15... [rpc_url]
"""

import logging
import sys

from starknet_checker import CheckRpcUrl, GatewayError, check_address
from starknet_checker.core.node import SEPOLIA_RPC_URL

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

address = "0x04e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e"
rpc_url = SEPOLIA_RPC_URL

if len(sys.argv) > 1:
    address = sys.argv[1]
if len(sys.argv) > 2:
    rpc_url = sys.argv[2]

print(f"Address: {address}")
print(f"Node:    {rpc_url}")
print("-" * 50)

try:
    result = check_address(address, CheckRpcUrl(rpc_url=rpc_url))
except GatewayError as e:
    print(f"Failed to check address: {e}")
    sys.exit(1)

print(f"  Valid:          {result.is_valid_address}")
print(f"  Smart wallet:   {result.is_smart_wallet}")
print(f"  Smart contract: {result.is_smart_contract}")
print(f"  Message:        {result.message}")
