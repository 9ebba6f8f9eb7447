"""
Wallet detection from a contract class.

An account contract (smart wallet) must expose both `__execute__` and
`__validate__` as external entry points; the protocol calls them to
validate and run the account's transactions. Any other deployed class is
treated as an ordinary smart contract.
"""

from __future__ import annotations

from starknet_checker.core.models import ContractClass, DeprecatedContractClass, SierraContractClass
from starknet_checker.core.selector import selectors_for

WALLET_ENTRY_POINTS = ("__execute__", "__validate__")

WALLET_SELECTORS = selectors_for(WALLET_ENTRY_POINTS)


def external_selectors(contract_class: ContractClass) -> set[int]:
    """Return the selectors of all external entry points of a class."""
    if isinstance(contract_class, (DeprecatedContractClass, SierraContractClass)):
        return {ep.selector for ep in contract_class.entry_points_by_type.external}
    raise TypeError(f"Unsupported contract class type: {type(contract_class).__name__}")


def is_wallet_class(contract_class: ContractClass) -> bool:
    """True if the class exposes every wallet entry point."""
    return WALLET_SELECTORS.issubset(external_selectors(contract_class))


classify = is_wallet_class
