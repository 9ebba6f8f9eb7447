"""
AddressChecker: classifies a Starknet address as smart wallet or smart contract.

Pipeline (each step can end the run):
    1. normalize the address format             -> "Invalid address format"
    2. fetch the class hash at the latest block -> "No contract at this address"
    3. fetch the class definition
    4. check for the wallet entry points        -> "smart-wallet" / "smart-contract"

Both node lookups go through `call_with_retry` with independent budgets.
Only StarknetNodeError is retried; programming errors surface at once.
A lookup that keeps failing raises GatewayError; no partial result is returned.

Usage:
    from starknet_checker import CheckRpcUrl, check_address

    result = check_address("0x04e4...", CheckRpcUrl(rpc_url=SEPOLIA_RPC_URL))
    if result.is_smart_contract:
        ...
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from starknet_checker.core.address import normalize_address, validate_address
from starknet_checker.core.classifier import is_wallet_class
from starknet_checker.core.models import CheckRpcUrl, ClassificationResult, ContractClass
from starknet_checker.core.node import StarknetNode, StarknetNodeError, get_provider
from starknet_checker.core.retry import BACKOFF_UNIT, MAX_RETRIES, call_with_retry

MSG_INVALID_FORMAT = "Invalid address format"
MSG_NOT_DEPLOYED = "No contract at this address"
MSG_SMART_WALLET = "smart-wallet"
MSG_SMART_CONTRACT = "smart-contract"

LATEST_BLOCK = "latest"


class AddressChecker:
    """
    Runs the classification pipeline against one node.

    Holds no per-call state, so a single instance can serve any number of
    checks (including from several threads sharing the node).

    Args:
        node:         StarknetNode (or anything with get_class_hash_at / get_class)
        max_retries:  retries per remote call
        backoff_unit: seconds per backoff step
        sleep:        sleep function used between retries
        logger:       receives the diagnostic lines; defaults to
                      the "starknet_checker.checker" logger
    """

    def __init__(
        self,
        node: StarknetNode,
        *,
        max_retries: int = MAX_RETRIES,
        backoff_unit: float = BACKOFF_UNIT,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | None = None,
    ) -> None:
        self._node = node
        self._max_retries = max_retries
        self._backoff_unit = backoff_unit
        self._sleep = sleep
        self._log = logger or logging.getLogger("starknet_checker.checker")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, address: str) -> ClassificationResult:
        """
        Classify an address.

        Returns:
            ClassificationResult: invalid / not deployed / smart wallet / smart contract

        Raises:
            GatewayError: if a node lookup failed on every attempt
        """
        valid, canonical = normalize_address(address)
        if not valid:
            return ClassificationResult(
                is_valid_address=False,
                is_smart_wallet=False,
                is_smart_contract=False,
                message=MSG_INVALID_FORMAT,
            )

        class_hash = self._fetch_class_hash(canonical)
        if class_hash == 0:
            self._log.info(f"Invalid or missing class hash for {canonical}")
            return ClassificationResult(
                is_valid_address=False,
                is_smart_wallet=False,
                is_smart_contract=False,
                message=MSG_NOT_DEPLOYED,
            )

        if self._is_wallet(canonical, class_hash):
            return ClassificationResult(
                is_valid_address=True,
                is_smart_wallet=True,
                is_smart_contract=False,
                message=MSG_SMART_WALLET,
            )

        # Anything deployed that is not an account is reported as a contract
        return ClassificationResult(
            is_valid_address=True,
            is_smart_wallet=False,
            is_smart_contract=True,
            message=MSG_SMART_CONTRACT,
        )

    def is_smart_wallet(self, address: str) -> bool:
        """
        True if a contract is deployed at `address` and it is an account.

        Raises:
            AddressError: if the address format is invalid
            GatewayError: if a node lookup failed on every attempt
        """
        canonical = validate_address(address)
        class_hash = self._fetch_class_hash(canonical)
        if class_hash == 0:
            self._log.info(f"Invalid or missing class hash for {canonical}")
            return False
        return self._is_wallet(canonical, class_hash)

    def is_smart_contract(self, address: str) -> bool:
        """
        True if a contract is deployed at `address` and it is not an account.

        Raises:
            AddressError: if the address format is invalid
            GatewayError: if a node lookup failed on every attempt
        """
        canonical = validate_address(address)
        class_hash = self._fetch_class_hash(canonical)
        if class_hash == 0:
            self._log.info(f"Invalid or missing class hash for {canonical}")
            return False
        return not self._is_wallet(canonical, class_hash)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_wallet(self, canonical: str, class_hash: int) -> bool:
        contract_class = self._fetch_class(class_hash)
        wallet = is_wallet_class(contract_class)
        if not wallet:
            self._log.info(f"No wallet entry points at {canonical}, not a wallet")
        return wallet

    def _fetch_class_hash(self, canonical: str) -> int:
        return call_with_retry(
            lambda: self._node.get_class_hash_at(canonical, LATEST_BLOCK),
            self._max_retries,
            backoff_unit=self._backoff_unit,
            sleep=self._sleep,
            description=f"get_class_hash_at({canonical})",
            retry_on=(StarknetNodeError,),
        )

    def _fetch_class(self, class_hash: int) -> ContractClass:
        return call_with_retry(
            lambda: self._node.get_class(class_hash, LATEST_BLOCK),
            self._max_retries,
            backoff_unit=self._backoff_unit,
            sleep=self._sleep,
            description=f"get_class({hex(class_hash)})",
            retry_on=(StarknetNodeError,),
        )


# ------------------------------------------------------------------
# One-shot helpers
# ------------------------------------------------------------------


def check_address(address: str, options: CheckRpcUrl) -> ClassificationResult:
    """
    Classify `address` against the node at `options.rpc_url`.

    The address format is checked before the node client is built, so an
    invalid address never touches the network (or the URL).

    Raises:
        ConfigError:  if rpc_url is missing or unparsable
        GatewayError: if a node lookup failed on every attempt
    """
    valid, _ = normalize_address(address)
    if not valid:
        return ClassificationResult(
            is_valid_address=False,
            is_smart_wallet=False,
            is_smart_contract=False,
            message=MSG_INVALID_FORMAT,
        )

    with get_provider(options) as node:
        return AddressChecker(node).check(address)


def is_smart_wallet(address: str, options: CheckRpcUrl) -> bool:
    """One-shot form of AddressChecker.is_smart_wallet."""
    with get_provider(options) as node:
        return AddressChecker(node).is_smart_wallet(address)


def is_smart_contract(address: str, options: CheckRpcUrl) -> bool:
    """One-shot form of AddressChecker.is_smart_contract."""
    with get_provider(options) as node:
        return AddressChecker(node).is_smart_contract(address)
