"""Authentication function descriptors and keyed MAC instances.

An ``AuthType`` describes one authentication algorithm (identity, maximum tag
length, description, test vectors) and is the only way to create an ``Auth``
instance. An ``Auth`` owns its algorithm state exclusively and moves through

    alloc -> init(key) -> [start -> update* -> compute]* -> dealloc

Instances are not thread-safe; independent instances share no mutable state.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from cryptography.hazmat.primitives.constant_time import bytes_eq

from ..debug import DebugModule, mod_auth
from ..exceptions import (
    AlgorithmFailError,
    AllocationFailureError,
    AuthComputationError,
    BadParameterError,
    CantCheckError,
)
from ..utils import HexString

# Largest tag a self-test vector may carry.
SELF_TEST_TAG_BUF_OCTETS = 32


class AuthAlgorithm(IntEnum):
    """Authentication function identifiers."""
    NULL_AUTH = 0
    UST_TMMHV2 = 1
    UST_AES_128_XMAC = 2
    HMAC_SHA1 = 3


@dataclass(frozen=True)
class AuthTestCase:
    """A known-answer vector; ``next`` chains further vectors for the same algorithm."""

    key: bytes
    data: bytes
    tag: bytes
    next: Optional["AuthTestCase"] = None

    @property
    def key_length_octets(self) -> int:
        return len(self.key)

    @property
    def data_length_octets(self) -> int:
        return len(self.data)

    @property
    def tag_length_octets(self) -> int:
        return len(self.tag)


class Auth:
    """A keyed MAC session created through an ``AuthType``.

    ``key_len`` and ``out_len`` are fixed at allocation. ``prefix_len`` is kept
    for algorithms that prepend material to the packet and is 0 for all the
    algorithms shipped here.

    The instance can be used as a context manager; leaving the block
    deallocates it.
    """

    def __init__(
        self,
        auth_type: AuthType,
        state: Any,
        key_len: int,
        out_len: int,
        prefix_len: int = 0,
    ) -> None:
        self.type: Optional[AuthType] = auth_type
        self.state: Any = state
        self.key_len = key_len
        self.out_len = out_len
        self.prefix_len = prefix_len

    def _live(self) -> tuple[AuthType, Any]:
        if self.type is None:
            raise AuthComputationError("auth instance has been deallocated")
        return self.type, self.state

    def init(self, key: bytes) -> None:
        """Key the instance with the first ``key_len`` bytes of ``key``."""
        auth_type, state = self._live()
        if len(key) < self.key_len:
            raise BadParameterError(
                f"key too short: need {self.key_len} bytes, got {len(key)}"
            )
        auth_type.init(state, bytes(key[: self.key_len]))

    def start(self) -> None:
        """Begin a new message under the established key."""
        auth_type, state = self._live()
        auth_type.start(state)

    def update(self, message: bytes) -> None:
        auth_type, state = self._live()
        auth_type.update(state, message)

    def compute(self, message: bytes = b"", tag_len: Optional[int] = None) -> bytes:
        """Absorb ``message``, finalize and return the leftmost ``tag_len`` bytes.

        ``tag_len`` defaults to the instance's configured ``out_len``. The
        instance is left finalized; call ``start()`` before the next message.
        """
        auth_type, state = self._live()
        if tag_len is None:
            tag_len = self.out_len
        return auth_type.compute(state, message, tag_len)

    def dealloc(self) -> None:
        auth_type, _ = self._live()
        auth_type.dealloc(self)

    def get_key_length(self) -> int:
        return self.key_len

    def get_tag_length(self) -> int:
        return self.out_len

    def get_prefix_length(self) -> int:
        return self.prefix_len

    def __enter__(self) -> "Auth":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.type is not None:
            self.dealloc()

    def __repr__(self) -> str:
        name = self.type.id.name if self.type is not None else "deallocated"
        return f"Auth({name}, key_len={self.key_len}, out_len={self.out_len})"


class AuthType(ABC):
    """Descriptor for one authentication algorithm.

    Subclasses supply the identity metadata as class attributes and implement
    the per-state hooks. ``max_tag_length`` of ``None`` means the algorithm
    places no upper bound on tag length.
    """

    id: AuthAlgorithm
    description: str
    max_tag_length: Optional[int]
    test_data: Optional[AuthTestCase] = None
    prefix_len: int = 0
    debug_name: str = "auth"

    def __init__(self, debug: Optional[DebugModule] = None) -> None:
        self.debug = debug if debug is not None else DebugModule(self.debug_name)

    # --- Per-algorithm hooks ---
    @abstractmethod
    def new_state(self) -> Any:
        """Create a fresh, unkeyed algorithm context."""

    @abstractmethod
    def init(self, state: Any, key: bytes) -> None:
        pass

    @abstractmethod
    def start(self, state: Any) -> None:
        pass

    @abstractmethod
    def update(self, state: Any, message: bytes) -> None:
        pass

    @abstractmethod
    def compute(self, state: Any, message: bytes, tag_len: int) -> bytes:
        pass

    @abstractmethod
    def release(self, state: Any) -> None:
        """Release the context and wipe any secret material it holds."""

    # --- Lifecycle ---
    def check_tag_length(self, tag_len: int) -> None:
        if tag_len < 0:
            raise BadParameterError(f"tag length must be non-negative, got {tag_len}")
        if self.max_tag_length is not None and tag_len > self.max_tag_length:
            raise BadParameterError(
                f"tag length {tag_len} exceeds {self.max_tag_length} for {self.description}"
            )

    def alloc(self, key_len: int, out_len: int) -> Auth:
        """Allocate an unkeyed instance with fixed key and tag lengths.

        Raises:
            BadParameterError: If a length is negative or out_len exceeds max_tag_length.
            AllocationFailureError: If the algorithm context cannot be created.
        """
        self.debug.print("allocating auth func with key length %d", key_len)
        self.debug.print("                          tag length %d", out_len)

        if key_len < 0:
            raise BadParameterError(f"key length must be non-negative, got {key_len}")
        self.check_tag_length(out_len)

        try:
            state = self.new_state()
        except MemoryError as e:
            raise AllocationFailureError(f"cannot allocate {self.description} context") from e

        return Auth(self, state, key_len, out_len, self.prefix_len)

    def dealloc(self, auth: Auth) -> None:
        """Release the instance's context, then zero and detach the instance."""
        state = auth.state
        auth.state = None
        auth.type = None
        auth.key_len = 0
        auth.out_len = 0
        auth.prefix_len = 0
        self.release(state)

    # --- Self-test ---
    def test(self, test_case: Optional[AuthTestCase]) -> None:
        """Run every vector in the chain starting at ``test_case``.

        Raises:
            CantCheckError: If there is no vector to run.
            BadParameterError: If a vector's tag is larger than the self-test buffer.
            AlgorithmFailError: If a computed tag differs from the expected one.
        """
        if test_case is None:
            raise CantCheckError(f"no test vectors for {self.description}")

        case_num = 0
        while test_case is not None:
            if test_case.tag_length_octets > SELF_TEST_TAG_BUF_OCTETS:
                raise BadParameterError(
                    f"test case {case_num} tag exceeds {SELF_TEST_TAG_BUF_OCTETS} octets"
                )
            with self.alloc(test_case.key_length_octets, test_case.tag_length_octets) as auth:
                auth.init(test_case.key)
                auth.start()
                tag = auth.compute(test_case.data, test_case.tag_length_octets)

                mod_auth.print("key: %s", HexString(test_case.key))
                mod_auth.print("data: %s", HexString(test_case.data))
                mod_auth.print("tag computed: %s", HexString(tag))
                mod_auth.print("tag expected: %s", HexString(test_case.tag))

                if not bytes_eq(tag, test_case.tag):
                    raise AlgorithmFailError(
                        f"{self.description}: test case {case_num} produced wrong tag"
                    )
            test_case = test_case.next
            case_num += 1

    def self_test(self) -> None:
        self.test(self.test_data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id.name}, max_tag_length={self.max_tag_length})"
