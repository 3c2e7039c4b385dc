"""HMAC-SHA1 authentication function backed by the 'cryptography' package.

``HmacSha1Context`` adapts ``cryptography.hazmat.primitives.hmac.HMAC`` to the
four operations an auth function needs (init with key, reset, update,
finalize). It keeps a keyed template and works on a ``copy()`` of it, so a
reset never needs the key bytes again.
"""
from __future__ import annotations

from typing import Optional

from cryptography.exceptions import AlreadyFinalized, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import AuthComputationError
from ..utils import HexString, secure_wipe
from .auth_type import AuthAlgorithm, AuthType
from .test_cases import HMAC_SHA1_TEST_CASE_0

SHA1_DIGEST_SIZE = 20


class HmacSha1Context:
    """Underlying HMAC-SHA1 state owned by exactly one ``Auth`` instance."""

    def __init__(self) -> None:
        self._template: Optional[hmac.HMAC] = None
        self._active: Optional[hmac.HMAC] = None

    @property
    def keyed(self) -> bool:
        return self._template is not None

    def init(self, key: bytes) -> None:
        self.free()
        try:
            self._template = hmac.HMAC(key, hashes.SHA1())
        except (UnsupportedAlgorithm, TypeError, ValueError) as e:
            raise AuthComputationError("HMAC-SHA1 key setup failed") from e
        self._active = self._template.copy()

    def reset(self) -> None:
        if self._template is None:
            raise AuthComputationError("HMAC-SHA1 context has not been keyed")
        try:
            self._active = self._template.copy()
        except AlreadyFinalized as e:
            raise AuthComputationError("HMAC-SHA1 reset failed") from e

    def update(self, data: bytes) -> None:
        if self._active is None:
            raise AuthComputationError("HMAC-SHA1 context has not been keyed")
        try:
            self._active.update(data)
        except (AlreadyFinalized, TypeError) as e:
            raise AuthComputationError("HMAC-SHA1 update failed") from e

    def finalize(self) -> bytes:
        if self._active is None:
            raise AuthComputationError("HMAC-SHA1 context has not been keyed")
        try:
            return self._active.finalize()
        except AlreadyFinalized as e:
            raise AuthComputationError("HMAC-SHA1 finalize failed") from e

    def free(self) -> None:
        self._template = None
        self._active = None


class HmacSha1(AuthType):
    """HMAC-SHA1 with leftmost truncation to at most 20 bytes."""

    id = AuthAlgorithm.HMAC_SHA1
    description = "hmac sha-1 authentication function"
    max_tag_length = SHA1_DIGEST_SIZE
    test_data = HMAC_SHA1_TEST_CASE_0
    debug_name = "hmac sha-1"

    def new_state(self) -> HmacSha1Context:
        return HmacSha1Context()

    def init(self, state: HmacSha1Context, key: bytes) -> None:
        if state.keyed:
            self.debug.print("re-keying keyed context")
        state.init(key)

    def start(self, state: HmacSha1Context) -> None:
        state.reset()

    def update(self, state: HmacSha1Context, message: bytes) -> None:
        self.debug.print("input: %s", HexString(message))
        state.update(message)

    def compute(self, state: HmacSha1Context, message: bytes, tag_len: int) -> bytes:
        self.debug.print("input: %s", HexString(message))

        # reject before touching the context
        self.check_tag_length(tag_len)

        state.update(message)
        hash_value = bytearray(state.finalize())
        try:
            if len(hash_value) < tag_len:
                raise AuthComputationError(
                    f"digest is {len(hash_value)} bytes, {tag_len} requested"
                )
            tag = bytes(hash_value[:tag_len])
        finally:
            secure_wipe(hash_value)

        self.debug.print("output: %s", HexString(tag))
        return tag

    def release(self, state: HmacSha1Context) -> None:
        state.free()
