"""srtp-auth: pluggable SRTP authentication functions (HMAC-SHA1, null)."""

from .auth import Auth, AuthAlgorithm, AuthTestCase, AuthType, HmacSha1, NullAuth
from .debug import DebugModule
from .exceptions import (
    AlgorithmFailError,
    AllocationFailureError,
    AuthComputationError,
    BadParameterError,
    CantCheckError,
    ErrorStatus,
    NoSuchAlgorithmError,
    SrtpAuthError,
)
from .kernel import AuthKernel, default_kernel
from .policy import AuthPolicy

__version__ = "0.1.0"

__all__ = [
    "Auth",
    "AuthAlgorithm",
    "AuthTestCase",
    "AuthType",
    "HmacSha1",
    "NullAuth",
    "DebugModule",
    "AuthKernel",
    "default_kernel",
    "AuthPolicy",
    "ErrorStatus",
    "SrtpAuthError",
    "BadParameterError",
    "AllocationFailureError",
    "AuthComputationError",
    "AlgorithmFailError",
    "NoSuchAlgorithmError",
    "CantCheckError",
    "__version__",
]
