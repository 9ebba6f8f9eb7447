"""
StarknetNode: synchronous wrapper around starknet_py's FullNodeClient.

Only the read methods the address checker needs are exposed. Every node
or transport failure is raised as StarknetNodeError so callers (and the
retry gateway) deal with a single error type.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, TypeVar

import aiohttp
import httpx
from starknet_py.net.client_errors import ClientError
from starknet_py.net.full_node_client import FullNodeClient

from starknet_checker.core.address import address_to_felt
from starknet_checker.core.errors import ConfigError
from starknet_checker.core.models import CheckRpcUrl, ContractClass

logger = logging.getLogger("starknet_checker.node")

T = TypeVar("T")

# Public endpoints
MAINNET_RPC_URL = "https://starknet-mainnet.public.blastapi.io/rpc/v0_7"
SEPOLIA_RPC_URL = "https://free-rpc.nethermind.io/sepolia-juno"

BLOCK_TAGS = ("latest", "pending")

# JSON-RPC error codes that mean "nothing there"
CONTRACT_NOT_FOUND = 20
BLOCK_NOT_FOUND = 24
CLASS_HASH_NOT_FOUND = 28


class StarknetNodeError(Exception):
    """Raised when the node returns an error or cannot be reached."""

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class NotFoundError(StarknetNodeError):
    """Raised when the requested contract, class or block does not exist."""
    pass


class StarknetNode:
    """
    Synchronous client for the Starknet network.

    Each call runs the starknet_py coroutine to completion under a timeout,
    so it must not be called from inside a running event loop.

    Usage:
        node = StarknetNode("https://free-rpc.nethermind.io/sepolia-juno")
        class_hash = node.get_class_hash_at("0x04e4...")
        contract_class = node.get_class(class_hash)
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 15.0,
        client: FullNodeClient | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._client = client or FullNodeClient(node_url=rpc_url)
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Chain info
    # ------------------------------------------------------------------

    def get_chain_id(self) -> str:
        """Return the chain id as a hex string (e.g. 0x534e5f5345504f4c4941)."""
        return str(self._run("starknet_chainId", self._client.get_chain_id()))

    def get_block_number(self) -> int:
        """Return the latest accepted block number."""
        return int(self._run("starknet_blockNumber", self._client.get_block_number()))

    # ------------------------------------------------------------------
    # Contracts & classes
    # ------------------------------------------------------------------

    def get_class_hash_at(self, address: str | int, block_id: str | int = "latest") -> int:
        """
        Return the class hash deployed at `address`.

        Raises:
            NotFoundError: if no contract exists at the address
        """
        contract_address = address if isinstance(address, int) else address_to_felt(address)
        return self._run(
            "starknet_getClassHashAt",
            self._client.get_class_hash_at(contract_address=contract_address, **_block_kwargs(block_id)),
        )

    def get_class(self, class_hash: str | int, block_id: str | int = "latest") -> ContractClass:
        """
        Return the contract class definition for a class hash.

        Returns:
            DeprecatedContractClass (Cairo 0) or SierraContractClass

        Raises:
            NotFoundError: if the class hash was never declared
        """
        return self._run(
            "starknet_getClass",
            self._client.get_class_by_hash(class_hash=class_hash, **_block_kwargs(block_id)),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _run(self, method: str, call: Awaitable[T]) -> T:
        if self._closed:
            # drop the coroutine without awaiting it
            getattr(call, "close", lambda: None)()
            raise StarknetNodeError(f"Node client for {self.rpc_url} is closed")

        logger.debug(f"RPC {method} -> {self.rpc_url}")
        try:
            return asyncio.run(asyncio.wait_for(call, self.timeout))
        except ClientError as e:
            code = _error_code(e)
            message = f"RPC error {code} for {method}: {e.message}"
            if code in (CONTRACT_NOT_FOUND, CLASS_HASH_NOT_FOUND, BLOCK_NOT_FOUND):
                raise NotFoundError(message, code=code, data=e.data) from e
            raise StarknetNodeError(message, code=code, data=e.data) from e
        except asyncio.TimeoutError as e:
            raise StarknetNodeError(f"Timed out after {self.timeout:g}s calling {method}") from e
        except aiohttp.ClientError as e:
            raise StarknetNodeError(f"Transport error calling {method}: {e}") from e

    def close(self) -> None:
        """Mark the client closed; later calls raise StarknetNodeError."""
        self._closed = True

    def __enter__(self) -> StarknetNode:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


def get_provider(options: CheckRpcUrl, timeout: float = 15.0) -> StarknetNode:
    """
    Build a node client from check options.

    Raises:
        ConfigError: if rpc_url is missing or not an http(s) URL
    """
    rpc_url = options.rpc_url
    if not rpc_url:
        raise ConfigError("Missing node URL")

    try:
        url = httpx.URL(rpc_url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid node URL {rpc_url!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"Invalid node URL {rpc_url!r}: expected an http(s) URL")

    return StarknetNode(rpc_url, timeout=timeout)


def _block_kwargs(block_id: str | int) -> dict[str, Any]:
    if isinstance(block_id, int) or block_id in BLOCK_TAGS:
        return {"block_number": block_id}
    if block_id.startswith("0x"):
        return {"block_hash": block_id}
    raise ValueError(f"Unsupported block id: {block_id!r}")


def _error_code(error: ClientError) -> int | None:
    try:
        return int(error.code) if error.code is not None else None
    except (TypeError, ValueError):
        return None
