"""
Entry point selectors.

A Starknet selector is the Keccak-256 hash of the function name, truncated
to 250 bits so that it always fits in a field element. The default and
L1 default entry points map to selector 0.
"""

from __future__ import annotations

from starknet_py.hash.selector import get_selector_from_name

__all__ = ["get_selector_from_name", "selectors_for"]


def selectors_for(names: tuple[str, ...] | list[str]) -> frozenset[int]:
    """Selectors for a group of function names."""
    return frozenset(get_selector_from_name(name) for name in names)
