"""
Keypair tests.

Uses the first Ed25519 test vector from RFC 8032.
"""

import pytest

from stellar_txnbuild.crypto import Keypair, KeypairError
from stellar_txnbuild.runtime.errors import AddressError

RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_ADDRESS = "GDLVVGABQKYQVN6VJP7NHSLEA45A5YLS6PNKMIZFV4BBU2HXA5IRVHUR"
RFC8032_SECRET = "SCOWDMM5576VUYF2QRFPJEXMFTCEISOFNF5TE2IZOA52YAY4VZ7WBQNO"


class TestKeypair:
    """Keypair derivation, StrKey forms and signing."""

    def test_from_raw_seed(self):
        keypair = Keypair.from_raw_seed(RFC8032_SEED)

        assert keypair.raw_public_key() == RFC8032_PUBLIC
        assert keypair.address() == RFC8032_ADDRESS
        assert keypair.secret() == RFC8032_SECRET

    def test_from_secret(self):
        keypair = Keypair.from_secret(RFC8032_SECRET)

        assert keypair.address() == RFC8032_ADDRESS
        assert keypair.can_sign()

    def test_from_address_is_verify_only(self):
        keypair = Keypair.from_address(RFC8032_ADDRESS)

        assert not keypair.can_sign()
        with pytest.raises(KeypairError):
            keypair.sign(b"data")
        with pytest.raises(KeypairError):
            keypair.secret()

    def test_sign_and_verify(self):
        signer = Keypair.from_raw_seed(RFC8032_SEED)
        verifier = Keypair.from_address(RFC8032_ADDRESS)
        signature = signer.sign(b"")

        assert len(signature) == 64
        assert verifier.verify(b"", signature)
        assert not verifier.verify(b"tampered", signature)

    def test_random(self):
        first, second = Keypair.random(), Keypair.random()

        assert first != second
        assert first.address().startswith("G")

    def test_equality(self):
        assert Keypair.from_raw_seed(RFC8032_SEED) == Keypair.from_address(RFC8032_ADDRESS)

    def test_bad_seed_length(self):
        with pytest.raises(KeypairError):
            Keypair.from_raw_seed(b"short")

    def test_bad_secret(self):
        with pytest.raises(AddressError):
            Keypair.from_secret(RFC8032_ADDRESS)
