from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .auth.auth_type import Auth, AuthAlgorithm
from .auth.hmac_sha1 import SHA1_DIGEST_SIZE
from .exceptions import BadParameterError
from .kernel import AuthKernel, default_kernel


@dataclass
class AuthPolicy:
    """Authentication settings for one SRTP or SRTCP stream."""

    auth_type: AuthAlgorithm = AuthAlgorithm.HMAC_SHA1
    auth_key_len: int = SHA1_DIGEST_SIZE
    auth_tag_len: int = 10

    @classmethod
    def hmac_sha1_80(cls) -> "AuthPolicy":
        """HMAC-SHA1 with an 80-bit tag, the SRTP default."""
        return cls(AuthAlgorithm.HMAC_SHA1, SHA1_DIGEST_SIZE, 10)

    @classmethod
    def hmac_sha1_32(cls) -> "AuthPolicy":
        """HMAC-SHA1 with a 32-bit tag."""
        return cls(AuthAlgorithm.HMAC_SHA1, SHA1_DIGEST_SIZE, 4)

    @classmethod
    def null_auth(cls) -> "AuthPolicy":
        return cls(AuthAlgorithm.NULL_AUTH, 0, 0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthPolicy":
        raw_type = data.get("auth_type", AuthAlgorithm.HMAC_SHA1)
        try:
            if isinstance(raw_type, str) and not raw_type.isdigit():
                auth_type = AuthAlgorithm[raw_type.upper().replace("-", "_")]
            else:
                auth_type = AuthAlgorithm(int(raw_type))
        except (KeyError, ValueError) as e:
            raise BadParameterError(f"unknown auth type: {raw_type!r}") from e
        return cls(
            auth_type=auth_type,
            auth_key_len=int(data.get("auth_key_len", SHA1_DIGEST_SIZE)),
            auth_tag_len=int(data.get("auth_tag_len", 10)),
        )

    def as_runtime_dict(self) -> dict[str, int | str]:
        return {
            "auth_type": self.auth_type.name,
            "auth_key_len": int(self.auth_key_len),
            "auth_tag_len": int(self.auth_tag_len),
        }

    def validate(self, kernel: Optional[AuthKernel] = None) -> None:
        """Check the lengths against the registered algorithm.

        Raises:
            NoSuchAlgorithmError: If auth_type is not loaded in the kernel.
            BadParameterError: If a length is negative or the tag is too long.
        """
        kernel = kernel or default_kernel()
        auth_type = kernel.get_auth_type(self.auth_type)
        if self.auth_key_len < 0:
            raise BadParameterError(f"auth_key_len must be non-negative, got {self.auth_key_len}")
        auth_type.check_tag_length(self.auth_tag_len)

    def create_auth(self, kernel: Optional[AuthKernel] = None) -> Auth:
        """Allocate an unkeyed instance configured by this policy."""
        kernel = kernel or default_kernel()
        return kernel.alloc_auth(self.auth_type, self.auth_key_len, self.auth_tag_len)


__all__ = ["AuthPolicy"]
