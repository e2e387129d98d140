"""
Shared fixtures for the txnbuild test suite.
"""

import pytest

from stellar_txnbuild.runtime.strkey import AddressCodec
from helpers import mk_address, mk_keypair


@pytest.fixture
def codec():
    """StrKey address codec."""
    return AddressCodec()


@pytest.fixture
def keypair():
    """Deterministic keypair."""
    return mk_keypair(1)


@pytest.fixture
def address(keypair):
    """Valid ``G...`` address of the keypair fixture."""
    return keypair.address()


@pytest.fixture
def other_address():
    """A second valid ``G...`` address."""
    return mk_address(2)
