"""Null authentication function: accepts any key and produces all-zero tags."""
from __future__ import annotations

from ..utils import HexString
from .auth_type import AuthAlgorithm, AuthType
from .test_cases import NULL_AUTH_TEST_CASE_0


class NullAuthContext:
    pass


class NullAuth(AuthType):
    id = AuthAlgorithm.NULL_AUTH
    description = "null authentication function"
    max_tag_length = None
    test_data = NULL_AUTH_TEST_CASE_0
    debug_name = "auth func null"

    def new_state(self) -> NullAuthContext:
        return NullAuthContext()

    def init(self, state: NullAuthContext, key: bytes) -> None:
        pass

    def start(self, state: NullAuthContext) -> None:
        pass

    def update(self, state: NullAuthContext, message: bytes) -> None:
        self.debug.print("input: %s", HexString(message))

    def compute(self, state: NullAuthContext, message: bytes, tag_len: int) -> bytes:
        self.check_tag_length(tag_len)
        return bytes(tag_len)

    def release(self, state: NullAuthContext) -> None:
        pass
