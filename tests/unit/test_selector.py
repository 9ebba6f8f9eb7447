"""
Unit tests for entry point selector hashing.
"""

from starknet_checker.core.classifier import WALLET_SELECTORS
from starknet_checker.core.selector import get_selector_from_name, selectors_for

MASK_250 = 2**250 - 1


def test_execute_selector_matches_network_constant():
    assert get_selector_from_name("__execute__") == 0x15D40A3D6CA2AC30F4031E42BE28DA9B056FEF9BB7357AC5E85627EE876E5AD


def test_transfer_selector_matches_network_constant():
    assert get_selector_from_name("transfer") == 0x83AFD3F4CAEDC6EEBF44246FE54E38C95E3179A5EC9EA81740ECA5B482D12E


def test_default_entry_points_map_to_zero():
    assert get_selector_from_name("__default__") == 0
    assert get_selector_from_name("__l1_default__") == 0


def test_selector_fits_in_250_bits():
    for name in ("__execute__", "__validate__", "balance_of", "a" * 100):
        assert 0 <= get_selector_from_name(name) <= MASK_250


def test_selectors_for_group():
    group = selectors_for(["__execute__", "__validate__", "__execute__"])
    assert isinstance(group, frozenset)
    assert group == {get_selector_from_name("__execute__"), get_selector_from_name("__validate__")}


def test_wallet_selectors():
    assert WALLET_SELECTORS == selectors_for(("__execute__", "__validate__"))
