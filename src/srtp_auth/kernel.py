"""Registry of authentication functions keyed by ``AuthAlgorithm``.

Callers stay algorithm-agnostic by allocating through the kernel: it looks up
the descriptor for an id and lets the descriptor build the instance. A
descriptor is only registered after its self-test passes.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from .auth.auth_type import Auth, AuthAlgorithm, AuthType
from .auth.hmac_sha1 import HmacSha1
from .auth.null_auth import NullAuth
from .debug import DebugModule, mod_auth
from .exceptions import BadParameterError, NoSuchAlgorithmError, SrtpAuthError


@dataclass(frozen=True)
class AuthTypeStatus:
    id: AuthAlgorithm
    description: str
    passed: bool
    error: Optional[str] = None


class AuthKernel:
    def __init__(self) -> None:
        self._auth_types: Dict[AuthAlgorithm, AuthType] = {}
        self._debug_modules: Dict[str, DebugModule] = {}
        self.load_debug_module(mod_auth)

    # --- Auth types ---
    def load_auth_type(self, auth_type: AuthType, replace: bool = False) -> None:
        """Self-test ``auth_type`` and register it under its id.

        Raises:
            BadParameterError: If the id is already taken and replace is False.
            SrtpAuthError: Whatever the self-test raised; nothing is registered.
        """
        if auth_type.id in self._auth_types and not replace:
            raise BadParameterError(f"auth type {auth_type.id.name} is already loaded")
        auth_type.self_test()
        self.load_debug_module(auth_type.debug, replace=replace)
        self._auth_types[auth_type.id] = auth_type

    def replace_auth_type(self, auth_type: AuthType) -> None:
        self.load_auth_type(auth_type, replace=True)

    def get_auth_type(self, auth_id: AuthAlgorithm) -> AuthType:
        try:
            return self._auth_types[AuthAlgorithm(auth_id)]
        except (KeyError, ValueError) as e:
            raise NoSuchAlgorithmError(f"no auth type loaded for id {auth_id}") from e

    def alloc_auth(self, auth_id: AuthAlgorithm, key_len: int, tag_len: int) -> Auth:
        return self.get_auth_type(auth_id).alloc(key_len, tag_len)

    def list_auth_types(self) -> List[AuthType]:
        return [self._auth_types[k] for k in sorted(self._auth_types)]

    def status(self) -> List[AuthTypeStatus]:
        """Re-run every registered self-test and report the outcome per algorithm."""
        rows = []
        for at in self.list_auth_types():
            try:
                at.self_test()
            except SrtpAuthError as e:
                rows.append(AuthTypeStatus(at.id, at.description, False, str(e)))
            else:
                rows.append(AuthTypeStatus(at.id, at.description, True))
        return rows

    # --- Debug modules ---
    def load_debug_module(self, module: DebugModule, replace: bool = False) -> None:
        existing = self._debug_modules.get(module.name)
        if existing is not None and existing is not module and not replace:
            raise BadParameterError(f"debug module {module.name!r} is already loaded")
        self._debug_modules[module.name] = module

    def set_debug_module(self, name: str, on: bool) -> None:
        try:
            module = self._debug_modules[name]
        except KeyError as e:
            raise BadParameterError(f"no debug module named {name!r}") from e
        module.on = on

    def list_debug_modules(self) -> List[DebugModule]:
        return list(self._debug_modules.values())


_default_kernel: Optional[AuthKernel] = None
_default_lock = threading.Lock()


def default_kernel() -> AuthKernel:
    """Return the process-wide kernel, loading the shipped algorithms on first use."""
    global _default_kernel
    with _default_lock:
        if _default_kernel is None:
            kernel = AuthKernel()
            kernel.load_auth_type(NullAuth())
            kernel.load_auth_type(HmacSha1())
            _default_kernel = kernel
        return _default_kernel


__all__ = ["AuthKernel", "AuthTypeStatus", "default_kernel"]
