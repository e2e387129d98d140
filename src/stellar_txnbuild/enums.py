"""
Protocol enumerations for the Stellar set options operation.

Values match the ledger's XDR schema (Stellar-ledger-entries.x and
Stellar-transaction.x).
"""

from enum import IntEnum


class AccountFlag(IntEnum):
    """Bitmask flags used to set and clear account authorization options."""

    # Issuer must approve accounts before they can hold its credit
    AUTH_REQUIRED = 1
    # Issuer may revoke credit held by other accounts
    AUTH_REVOCABLE = 2
    # Authorization flags can never change again and the account can never be merged
    AUTH_IMMUTABLE = 4


AuthRequired = AccountFlag.AUTH_REQUIRED
AuthRevocable = AccountFlag.AUTH_REVOCABLE
AuthImmutable = AccountFlag.AUTH_IMMUTABLE


class OperationType(IntEnum):
    """Operation body discriminants."""

    CREATE_ACCOUNT = 0
    PAYMENT = 1
    PATH_PAYMENT = 2
    MANAGE_OFFER = 3
    CREATE_PASSIVE_OFFER = 4
    SET_OPTIONS = 5
    CHANGE_TRUST = 6
    ALLOW_TRUST = 7
    ACCOUNT_MERGE = 8
    INFLATION = 9
    MANAGE_DATA = 10
    BUMP_SEQUENCE = 11


class PublicKeyType(IntEnum):
    """Public key union discriminants."""

    ED25519 = 0


class SignerKeyType(IntEnum):
    """Signer key union discriminants."""

    ED25519 = 0
    PRE_AUTH_TX = 1
    HASH_X = 2


class VersionByte(IntEnum):
    """StrKey version bytes; the first base32 character follows from the high bits."""

    ACCOUNT_ID = 6 << 3     # G...
    SEED = 18 << 3          # S...
    PRE_AUTH_TX = 19 << 3   # T...
    SHA256_HASH = 23 << 3   # X...


__all__ = [
    "AccountFlag",
    "AuthRequired",
    "AuthRevocable",
    "AuthImmutable",
    "OperationType",
    "PublicKeyType",
    "SignerKeyType",
    "VersionByte",
]
