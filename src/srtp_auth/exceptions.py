"""Error statuses and exception hierarchy for srtp-auth.

Every failure surfaced by an authentication function is an ``SrtpAuthError``
subclass carrying the matching ``ErrorStatus`` so callers that speak in SRTP
status codes can map exceptions back onto them.
"""
from __future__ import annotations

from enum import IntEnum


class ErrorStatus(IntEnum):
    """SRTP status codes relevant to authentication functions."""

    OK = 0
    FAIL = 1
    BAD_PARAM = 2
    ALLOC_FAIL = 3
    DEALLOC_FAIL = 4
    INIT_FAIL = 5
    AUTH_FAIL = 7
    ALGO_FAIL = 11
    NO_SUCH_OP = 12
    CANT_CHECK = 14


class SrtpAuthError(Exception):
    """Base class for all srtp-auth failures."""

    status: ErrorStatus = ErrorStatus.FAIL


class BadParameterError(SrtpAuthError):
    """A length argument exceeds what the algorithm can provide."""

    status = ErrorStatus.BAD_PARAM


class AllocationFailureError(SrtpAuthError):
    """The instance or its underlying context could not be created."""

    status = ErrorStatus.ALLOC_FAIL


class AuthComputationError(SrtpAuthError):
    """The underlying MAC primitive failed while keying, resetting, absorbing or finalizing."""

    status = ErrorStatus.AUTH_FAIL


class AlgorithmFailError(SrtpAuthError):
    """A self-test produced a tag that differs from the published vector."""

    status = ErrorStatus.ALGO_FAIL


class NoSuchAlgorithmError(SrtpAuthError):
    """No authentication function is registered under the requested id."""

    status = ErrorStatus.NO_SUCH_OP


class CantCheckError(SrtpAuthError):
    """A self-test was requested for an algorithm that carries no test vectors."""

    status = ErrorStatus.CANT_CHECK


__all__ = [
    "ErrorStatus",
    "SrtpAuthError",
    "BadParameterError",
    "AllocationFailureError",
    "AuthComputationError",
    "AlgorithmFailError",
    "NoSuchAlgorithmError",
    "CantCheckError",
]
