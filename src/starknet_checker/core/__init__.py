"""core module init"""
from starknet_checker.core.address import (
    AddressError,
    address_to_felt,
    felt_to_address,
    is_valid_address,
    normalize_address,
    validate_address,
)
from starknet_checker.core.checker import (
    AddressChecker,
    check_address,
    is_smart_contract,
    is_smart_wallet,
)
from starknet_checker.core.classifier import classify, external_selectors, is_wallet_class
from starknet_checker.core.errors import CheckerError, ConfigError, GatewayError, PipelineError
from starknet_checker.core.models import (
    CheckRpcUrl,
    ClassificationResult,
    ContractClass,
    DeprecatedContractClass,
    LegacyContractClass,
    SierraContractClass,
)
from starknet_checker.core.node import NotFoundError, StarknetNode, StarknetNodeError, get_provider
from starknet_checker.core.retry import call_with_retry, with_retry
from starknet_checker.core.selector import get_selector_from_name, selectors_for

__all__ = [
    "AddressChecker",
    "AddressError",
    "CheckRpcUrl",
    "CheckerError",
    "ClassificationResult",
    "ConfigError",
    "ContractClass",
    "DeprecatedContractClass",
    "GatewayError",
    "LegacyContractClass",
    "NotFoundError",
    "PipelineError",
    "SierraContractClass",
    "StarknetNode",
    "StarknetNodeError",
    "address_to_felt",
    "call_with_retry",
    "check_address",
    "classify",
    "external_selectors",
    "felt_to_address",
    "get_provider",
    "get_selector_from_name",
    "is_smart_contract",
    "is_smart_wallet",
    "is_valid_address",
    "is_wallet_class",
    "normalize_address",
    "selectors_for",
    "validate_address",
    "with_retry",
]
