"""
Tests for the set options field-handler pipeline.

Covers flag merging, presence of zero-valued fields, home domain bounds,
signer handling, error priority and build determinism.
"""

import pytest
from pydantic import ValidationError

from stellar_txnbuild.enums import AccountFlag, AuthImmutable, AuthRequired, AuthRevocable, OperationType
from stellar_txnbuild.runtime.errors import (
    AddressError,
    EncodingError,
    ErrorCode,
    FieldTooLongError,
    InvalidAddressError,
)
from stellar_txnbuild.tx import BuilderParams, SetOptions, SignerSpec, build_set_options, merge_flags
from stellar_txnbuild.tx.set_options import build_set_options_op
from stellar_txnbuild.xdr_types import Operation, PublicKey, SetOptionsOp

from helpers import mk_address, mk_hash_x_address, mk_pre_auth_tx_address


ALL_SLOTS = [
    "inflation_dest", "clear_flags", "set_flags", "master_weight", "low_threshold",
    "med_threshold", "high_threshold", "home_domain", "signer",
]


def record_of(operation: Operation) -> SetOptionsOp:
    return operation.body.set_options_op


# =============================================================================
# Flag merging
# =============================================================================

class TestMergeFlags:
    """Tests for merge_flags."""

    def test_three_different_flags(self):
        assert merge_flags([1, 2, 4]) == 7

    def test_order_independent(self):
        assert merge_flags([4, 2, 1]) == merge_flags([1, 2, 4]) == 7

    def test_redundant_flags_allowed(self):
        assert merge_flags([1, 1, 2, 4, 2, 4]) == 7
        assert merge_flags([1, 2, 4, 2, 4, 1]) == 7

    def test_three_of_the_same(self):
        assert merge_flags([1, 1, 1]) == 1

    def test_less_than_three(self):
        assert merge_flags([1, 2]) == 3

    def test_undefined_bits_pass_through(self):
        assert merge_flags([3, 3, 3]) == 3
        assert merge_flags([0x100, 1]) == 0x101

    def test_zero_flags(self):
        assert merge_flags([0, 2, 0]) == 2

    def test_account_flag_constants(self):
        assert merge_flags([AuthRequired, AuthRevocable, AuthImmutable]) == 7
        assert merge_flags([AccountFlag.AUTH_REVOCABLE]) == 2

    def test_coerced_to_uint32(self):
        assert merge_flags([-1]) == 0xFFFFFFFF
        assert merge_flags([1 << 32 | 2]) == 2

    def test_empty(self):
        assert merge_flags([]) == 0

    def test_unknown_bits_survive_build(self):
        """Bits outside AccountFlag are encoded unchanged."""
        record = record_of(build_set_options(SetOptions(set_authorization=[8, 1], clear_authorization=[0x80000000])))

        assert record.set_flags == 9
        assert record.clear_flags == 0x80000000

    def test_params_carry_no_flag_mask(self):
        with pytest.raises(TypeError):
            BuilderParams(flag_mask=0x7)


# =============================================================================
# Flags in the record
# =============================================================================

class TestAuthorizationFlags:
    """Flag sequences become present or absent slots."""

    def test_set_flags_only(self):
        """Only the set-flags slot is present and the envelope wraps it."""
        operation = build_set_options(SetOptions(set_authorization=[1, 2, 4]))

        assert operation.body.type == OperationType.SET_OPTIONS
        record = record_of(operation)
        assert record.set_flags == 7
        assert record.present_fields() == ["set_flags"]
        assert operation.source_account is None

    def test_clear_flags(self):
        record = record_of(build_set_options(SetOptions(clear_authorization=[AuthRevocable, AuthRequired])))

        assert record.clear_flags == 3
        assert record.set_flags is None

    def test_set_and_clear_are_independent(self):
        request = SetOptions(set_authorization=[1], clear_authorization=[2, 4])
        record = record_of(build_set_options(request))

        assert record.set_flags == 1
        assert record.clear_flags == 6

    def test_empty_sequence_is_absent(self):
        record = record_of(build_set_options(SetOptions(set_authorization=[], clear_authorization=[])))

        assert record.set_flags is None
        assert record.clear_flags is None

    def test_zero_sequence_is_present(self):
        """[0] stores a zero mask; [] stores nothing."""
        zero = record_of(build_set_options(SetOptions(set_authorization=[0])))
        empty = record_of(build_set_options(SetOptions()))

        assert zero.set_flags == 0
        assert "set_flags" in zero.present_fields()
        assert empty.set_flags is None
        assert zero != empty
        assert zero.to_xdr() != empty.to_xdr()

    def test_out_of_range_flag_rejected_by_request(self):
        with pytest.raises(ValidationError):
            SetOptions(set_authorization=[1 << 32])


# =============================================================================
# Weights and thresholds
# =============================================================================

class TestWeightsAndThresholds:
    """Optional small integers are forwarded as-is."""

    def test_zero_values_are_present(self):
        request = SetOptions(master_weight=0, low_threshold=0, medium_threshold=0, high_threshold=0)
        record = record_of(build_set_options(request))

        assert record.master_weight == 0
        assert record.low_threshold == 0
        assert record.med_threshold == 0
        assert record.high_threshold == 0

    def test_unset_values_are_absent(self):
        record = record_of(build_set_options(SetOptions(low_threshold=1)))

        assert record.low_threshold == 1
        assert record.master_weight is None
        assert record.med_threshold is None
        assert record.high_threshold is None

    def test_values_forwarded(self):
        request = SetOptions(master_weight=255, low_threshold=1, medium_threshold=2, high_threshold=3)
        record = record_of(build_set_options(request))

        assert (record.master_weight, record.low_threshold, record.med_threshold, record.high_threshold) == (255, 1, 2, 3)

    @pytest.mark.parametrize("field", ["master_weight", "low_threshold", "medium_threshold", "high_threshold"])
    def test_out_of_range_rejected(self, field):
        with pytest.raises(ValidationError):
            SetOptions(**{field: 256})
        with pytest.raises(ValidationError):
            SetOptions(**{field: -1})

    def test_assignment_validated(self):
        request = SetOptions()
        with pytest.raises(ValidationError):
            request.master_weight = 300


# =============================================================================
# Home domain
# =============================================================================

class TestHomeDomain:
    """Home domain length bound."""

    def test_exactly_32_characters(self):
        domain = "a" * 28 + ".com"
        record = record_of(build_set_options(SetOptions(home_domain=domain)))

        assert record.home_domain == domain

    def test_33_characters_fails(self):
        with pytest.raises(FieldTooLongError) as exc_info:
            build_set_options(SetOptions(home_domain="a" * 33))

        error = exc_info.value
        assert error.field == "home domain"
        assert error.length == 33
        assert error.limit == 32
        assert error.code == ErrorCode.FIELD_TOO_LONG

    def test_40_characters_fails(self):
        with pytest.raises(EncodingError) as exc_info:
            build_set_options(SetOptions(home_domain="x" * 40))

        assert isinstance(exc_info.value, FieldTooLongError)
        assert exc_info.value.details == {"field": "home domain", "length": 40, "limit": 32}

    def test_empty_is_absent(self):
        record = record_of(build_set_options(SetOptions(home_domain="")))

        assert record.home_domain is None

    def test_multibyte_measured_in_bytes(self):
        # 11 three-byte characters
        with pytest.raises(FieldTooLongError) as exc_info:
            build_set_options(SetOptions(home_domain="€" * 11))

        assert exc_info.value.length == 33
        assert exc_info.value.message == "home domain must be 32 bytes or fewer, got 33"

    def test_params_limit(self):
        params = BuilderParams(home_domain_max_length=10)

        with pytest.raises(FieldTooLongError) as exc_info:
            build_set_options(SetOptions(home_domain="example.com"), params=params)

        assert exc_info.value.limit == 10

    def test_params_bounded_by_wire_type(self):
        with pytest.raises(ValueError):
            BuilderParams(home_domain_max_length=64)


# =============================================================================
# Inflation destination
# =============================================================================

class TestInflationDestination:
    """Inflation destination is resolved through the address codec."""

    def test_valid_address(self, keypair, address):
        record = record_of(build_set_options(SetOptions(inflation_destination=address)))

        assert record.inflation_dest.ed25519 == keypair.raw_public_key()
        assert record.inflation_dest.address == address

    def test_invalid_address(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            build_set_options(SetOptions(inflation_destination="GBADADDRESS"))

        error = exc_info.value
        assert error.field == "inflation destination"
        assert isinstance(error.cause, AddressError)
        assert error.__cause__ is error.cause

    def test_seed_is_not_an_account(self):
        with pytest.raises(InvalidAddressError):
            build_set_options(SetOptions(
                inflation_destination="SCOWDMM5576VUYF2QRFPJEXMFTCEISOFNF5TE2IZOA52YAY4VZ7WBQNO"
            ))

    def test_empty_is_absent(self):
        record = record_of(build_set_options(SetOptions(inflation_destination="")))

        assert record.inflation_dest is None


# =============================================================================
# Signer
# =============================================================================

class TestSigner:
    """Signer pair handling."""

    def test_no_signer(self):
        assert record_of(build_set_options(SetOptions())).signer is None

    def test_default_pair_is_absent(self):
        for signer in (SignerSpec(), SignerSpec(address="", weight=0), SignerSpec(address="", weight=None)):
            record = record_of(build_set_options(SetOptions(signer=signer)))
            assert record.signer is None

    def test_signer_with_weight(self, keypair, address):
        record = record_of(build_set_options(SetOptions(signer=SignerSpec(address=address, weight=5))))

        assert record.signer.key.key == keypair.raw_public_key()
        assert record.signer.key.address == address
        assert record.signer.weight == 5

    def test_zero_weight_removes_signer(self, address):
        record = record_of(build_set_options(SetOptions(signer=SignerSpec(address=address, weight=0))))

        assert record.signer is not None
        assert record.signer.weight == 0

    def test_missing_weight_encodes_zero(self, address):
        record = record_of(build_set_options(SetOptions(signer={"address": address})))

        assert record.signer.weight == 0

    def test_pre_auth_tx_signer(self):
        address = mk_pre_auth_tx_address()
        record = record_of(build_set_options(SetOptions(signer=SignerSpec(address=address, weight=1))))

        assert record.signer.key.type == 1
        assert record.signer.key.address == address

    def test_hash_x_signer(self):
        address = mk_hash_x_address()
        record = record_of(build_set_options(SetOptions(signer=SignerSpec(address=address, weight=1))))

        assert record.signer.key.type == 2
        assert record.signer.key.address == address

    def test_invalid_signer_address(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            build_set_options(SetOptions(signer=SignerSpec(address="not-an-address", weight=1)))

        assert exc_info.value.field == "signer"

    def test_weight_without_address(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            build_set_options(SetOptions(signer=SignerSpec(weight=3)))

        assert exc_info.value.field == "signer"


# =============================================================================
# Source account
# =============================================================================

class TestSourceAccount:
    """Operation-level source account."""

    def test_source_account(self, keypair, address):
        operation = build_set_options(SetOptions(master_weight=1, source_account=address))

        assert operation.source_account.ed25519 == keypair.raw_public_key()

    def test_invalid_source_account(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            build_set_options(SetOptions(source_account="GXYZ"))

        assert exc_info.value.field == "source account"


# =============================================================================
# Pipeline behavior
# =============================================================================

class TestBuildPipeline:
    """Error priority, determinism and request immutability."""

    def test_empty_request(self):
        operation = build_set_options(SetOptions())
        record = record_of(operation)

        assert record.present_fields() == []
        assert all(getattr(record, slot) is None for slot in ALL_SLOTS)

    def test_all_fields(self, address, other_address):
        request = SetOptions(
            inflation_destination=address,
            set_authorization=[AuthRequired],
            clear_authorization=[AuthRevocable],
            master_weight=10,
            low_threshold=1,
            medium_threshold=2,
            high_threshold=3,
            home_domain="stellar.org",
            signer=SignerSpec(address=other_address, weight=4),
        )
        record = record_of(build_set_options(request))

        assert record.present_fields() == ALL_SLOTS

    def test_first_error_wins(self):
        """Inflation destination is checked before the home domain."""
        request = SetOptions(inflation_destination="bad", home_domain="a" * 40)

        with pytest.raises(InvalidAddressError):
            build_set_options(request)

    def test_home_domain_before_signer(self):
        request = SetOptions(home_domain="a" * 40, signer=SignerSpec(address="bad", weight=1))

        with pytest.raises(FieldTooLongError):
            build_set_options(request)

    def test_build_is_deterministic(self, address, other_address):
        request = SetOptions(
            inflation_destination=address,
            set_authorization=[1, 2],
            master_weight=0,
            home_domain="example.com",
            signer=SignerSpec(address=other_address, weight=0),
        )

        first = build_set_options(request)
        second = build_set_options(request)

        assert first == second
        assert first.to_xdr() == second.to_xdr()

    def test_request_not_mutated(self, address):
        request = SetOptions(inflation_destination=address, set_authorization=[4, 4], master_weight=0)
        before = request.model_dump()

        build_set_options(request)

        assert request.model_dump() == before

    def test_retry_after_fix(self):
        request = SetOptions(set_authorization=[1], home_domain="a" * 33)
        with pytest.raises(FieldTooLongError):
            build_set_options(request)

        request.home_domain = "a" * 32
        record = record_of(build_set_options(request))

        assert record.set_flags == 1
        assert record.home_domain == "a" * 32

    def test_build_xdr_method(self):
        request = SetOptions(set_authorization=[1, 2, 4])

        assert request.build_xdr() == build_set_options(request)

    def test_record_only(self):
        record = build_set_options_op(SetOptions(low_threshold=0))

        assert isinstance(record, SetOptionsOp)
        assert record.low_threshold == 0

    def test_aliases(self, address):
        request = SetOptions(inflationDestination=address, setAuthorization=[2], homeDomain="a.io")
        record = record_of(build_set_options(request))

        assert record.set_flags == 2
        assert record.home_domain == "a.io"

    def test_custom_codec(self, keypair):
        """Any object with resolve/resolve_signer_key can stand in for the StrKey codec."""
        calls = []

        class RecordingCodec:
            def resolve(self, address):
                calls.append(address)
                return PublicKey(ed25519=keypair.raw_public_key())

            def resolve_signer_key(self, address):
                raise AddressError("unsupported")

        operation = build_set_options(SetOptions(inflation_destination="anything"), codec=RecordingCodec())

        assert calls == ["anything"]
        assert record_of(operation).inflation_dest.ed25519 == keypair.raw_public_key()

    def test_distinct_addresses(self):
        assert mk_address(3) != mk_address(4)
