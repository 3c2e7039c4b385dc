"""Known-answer vectors used by the authentication function self-tests."""
from __future__ import annotations

from .auth_type import AuthTestCase

# RFC 2202 HMAC-SHA1 test case 2
HMAC_SHA1_TEST_CASE_1 = AuthTestCase(
    key=b"Jefe",
    data=b"what do ya want for nothing?",
    tag=bytes.fromhex("effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
)

# RFC 2202 HMAC-SHA1 test case 1
HMAC_SHA1_TEST_CASE_0 = AuthTestCase(
    key=b"\x0b" * 20,
    data=b"Hi There",
    tag=bytes.fromhex("b617318655057264e28bc0b6fb378c8ef146be00"),
    next=HMAC_SHA1_TEST_CASE_1,
)

NULL_AUTH_TEST_CASE_0 = AuthTestCase(key=b"", data=b"", tag=b"")
