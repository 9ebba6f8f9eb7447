"""
starknet-checker: tell Starknet smart wallets from smart contracts.

Usage:
    from starknet_checker import CheckRpcUrl, check_address
    from starknet_checker import AddressChecker, StarknetNode
"""

from starknet_checker.core.address import normalize_address
from starknet_checker.core.checker import AddressChecker, check_address, is_smart_contract, is_smart_wallet
from starknet_checker.core.errors import ConfigError, GatewayError, PipelineError
from starknet_checker.core.models import CheckRpcUrl, ClassificationResult
from starknet_checker.core.node import StarknetNode

__version__ = "0.1.0"
__all__ = [
    "AddressChecker",
    "CheckRpcUrl",
    "ClassificationResult",
    "ConfigError",
    "GatewayError",
    "PipelineError",
    "StarknetNode",
    "check_address",
    "is_smart_contract",
    "is_smart_wallet",
    "normalize_address",
]
