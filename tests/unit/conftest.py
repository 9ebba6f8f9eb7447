"""
Shared offline fixtures: contract class builders and a scripted fake node.
"""

import pytest
from starknet_py.net.client_models import (
    DeprecatedContractClass,
    EntryPoint,
    EntryPointsByType,
    SierraContractClass,
    SierraEntryPoint,
    SierraEntryPointsByType,
)

from starknet_checker.core.selector import get_selector_from_name

WALLET_ADDRESS = "0x0554b4a27e6ba1e00a01deebdf486c9c0e7bffc5074f67dfbb79bbf011162a62"
CONTRACT_ADDRESS = "0x04e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e"
UNDEPLOYED_ADDRESS = "0x01729ce1ad61551f08a1a5d4a8a0d3753de028b26b229ff021ad8a9d3c1c29c9"

WALLET_CLASS_HASH = 0x29927C8AF6BCCF3F6FDA035981E765A7BDBF18A2DC0D630494F8758AA908E2B
CONTRACT_CLASS_HASH = 0x5FFBCFEB50D200A0677C48A129A11245A3FC519D1D98D76882D1C9A1B19C6ED


def sierra_class(*names):
    """Sierra (Cairo 1+) class exposing `names` as external entry points."""
    return SierraContractClass(
        contract_class_version="0.1.0",
        sierra_program=[0x1, 0x3, 0x0],
        entry_points_by_type=SierraEntryPointsByType(
            constructor=[],
            external=[
                SierraEntryPoint(selector=get_selector_from_name(n), function_idx=i)
                for i, n in enumerate(names)
            ],
            l1_handler=[],
        ),
        abi="[]",
    )


def legacy_class(*names):
    """Cairo 0 class exposing `names` as external entry points."""
    return DeprecatedContractClass(
        program={"data": [], "builtins": []},
        entry_points_by_type=EntryPointsByType(
            constructor=[],
            external=[
                EntryPoint(selector=get_selector_from_name(n), offset=0x3A + i)
                for i, n in enumerate(names)
            ],
            l1_handler=[],
        ),
        abi=[],
    )


class FakeNode:
    """
    Scripted stand-in for StarknetNode.

    `class_hashes` maps canonical address -> class hash (int) or an exception.
    `classes` maps class hash -> contract class or an exception.
    Exceptions listed in `failures` are raised first, in order, per method.
    """

    def __init__(self, class_hashes=None, classes=None):
        self.class_hashes = class_hashes or {}
        self.classes = classes or {}
        self.failures = {"get_class_hash_at": [], "get_class": []}
        self.calls = []

    def get_class_hash_at(self, address, block_id="latest"):
        self.calls.append(("get_class_hash_at", address, block_id))
        if self.failures["get_class_hash_at"]:
            raise self.failures["get_class_hash_at"].pop(0)
        value = self.class_hashes[address]
        if isinstance(value, Exception):
            raise value
        return value

    def get_class(self, class_hash, block_id="latest"):
        self.calls.append(("get_class", class_hash, block_id))
        if self.failures["get_class"]:
            raise self.failures["get_class"].pop(0)
        value = self.classes[class_hash]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_node():
    return FakeNode(
        class_hashes={
            WALLET_ADDRESS: WALLET_CLASS_HASH,
            CONTRACT_ADDRESS: CONTRACT_CLASS_HASH,
            UNDEPLOYED_ADDRESS: 0,
        },
        classes={
            WALLET_CLASS_HASH: sierra_class("__validate__", "__execute__", "is_valid_signature"),
            CONTRACT_CLASS_HASH: sierra_class("__execute__", "transfer", "balance_of"),
        },
    )


@pytest.fixture
def sleeps():
    """List that records every backoff delay."""
    return []
