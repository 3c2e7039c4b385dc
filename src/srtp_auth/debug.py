"""Named, toggleable debug trace modules backed by the standard logging package.

A ``DebugModule`` is owned by whoever constructs it (an authentication
function descriptor, the kernel) instead of living as hidden global state.
Records go to ``logging.getLogger("srtp_auth.<slug>")`` at DEBUG level and are
only produced while the module is switched on; handler and level setup is the
application's business.
"""
from __future__ import annotations

import logging
import re
from typing import Any

LOGGER_PREFIX = "srtp_auth"


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


class DebugModule:
    """A printable-named trace switch, off by default."""

    def __init__(self, name: str, on: bool = False) -> None:
        self.name = name
        self.on = on
        self.logger = logging.getLogger(f"{LOGGER_PREFIX}.{_slug(name)}")

    def enable(self) -> None:
        self.on = True

    def disable(self) -> None:
        self.on = False

    def print(self, msg: str, *args: Any) -> None:
        """Emit ``msg % args`` at DEBUG if the module is on."""
        if self.on:
            self.logger.debug("%s: " + msg, self.name, *args)

    def __repr__(self) -> str:
        return f"DebugModule(name={self.name!r}, on={self.on})"


# Traces shared auth-function machinery (self-tests).
mod_auth = DebugModule("auth func")

__all__ = ["DebugModule", "mod_auth", "LOGGER_PREFIX"]
