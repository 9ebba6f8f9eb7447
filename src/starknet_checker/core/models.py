"""
Core data models for Starknet address classification.

Contract classes come straight from starknet_py: Cairo 0 classes as
DeprecatedContractClass, Cairo 1+ classes as SierraContractClass.
Field elements (selectors, class hashes) are plain ints.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict
from starknet_py.net.client_models import DeprecatedContractClass, SierraContractClass

LegacyContractClass = DeprecatedContractClass

ContractClass = Union[DeprecatedContractClass, SierraContractClass]


class CheckRpcUrl(BaseModel):
    """Options for a one-shot address check: the node endpoint to query."""
    rpc_url: str | None = None


class ClassificationResult(BaseModel):
    """Outcome of an address check. Immutable once produced."""
    model_config = ConfigDict(frozen=True)

    is_valid_address: bool
    is_smart_wallet: bool
    is_smart_contract: bool
    message: str

    def summary(self) -> str:
        """One-line human-readable summary."""
        if self.is_smart_wallet:
            kind = "smart wallet"
        elif self.is_smart_contract:
            kind = "smart contract"
        else:
            kind = "not a deployed contract"
        return f"{kind} ({self.message})"
