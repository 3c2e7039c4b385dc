"""Authentication function descriptors, instances and the shipped algorithms."""

from .auth_type import (
    SELF_TEST_TAG_BUF_OCTETS,
    Auth,
    AuthAlgorithm,
    AuthTestCase,
    AuthType,
)
from .hmac_sha1 import SHA1_DIGEST_SIZE, HmacSha1, HmacSha1Context
from .null_auth import NullAuth

__all__ = [
    "SELF_TEST_TAG_BUF_OCTETS",
    "SHA1_DIGEST_SIZE",
    "Auth",
    "AuthAlgorithm",
    "AuthTestCase",
    "AuthType",
    "HmacSha1",
    "HmacSha1Context",
    "NullAuth",
]
