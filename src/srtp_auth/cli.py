from __future__ import annotations

import argparse
import binascii
import logging
import sys

from .auth.auth_type import AuthAlgorithm
from .exceptions import SrtpAuthError
from .kernel import AuthKernel, default_kernel

_TYPE_NAMES = {
    "hmac-sha1": AuthAlgorithm.HMAC_SHA1,
    "null": AuthAlgorithm.NULL_AUTH,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="srtp-auth-driver")
    p.add_argument("-v", "--verbose", action="store_true", help="enable every debug module")
    p.add_argument(
        "-d", "--debug", action="append", default=[], metavar="MODULE",
        help="enable the named debug module (repeatable)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("validate")
    sub.add_parser("list")
    t = sub.add_parser("tag")
    t.add_argument("--type", choices=sorted(_TYPE_NAMES), default="hmac-sha1")
    t.add_argument("--key", required=True)  # hex
    t.add_argument("--tag-len", type=int, default=None)
    t.add_argument("message")  # hex
    return p


def _configure_debug(kernel: AuthKernel, args: argparse.Namespace) -> None:
    if not (args.verbose or args.debug):
        return
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")
    if args.verbose:
        for module in kernel.list_debug_modules():
            module.enable()
    for name in args.debug:
        kernel.set_debug_module(name, True)


def _cmd_validate(kernel: AuthKernel) -> int:
    failed = False
    for row in kernel.status():
        if row.passed:
            print(f"{row.description}: passed")
        else:
            print(f"{row.description}: FAILED ({row.error})")
            failed = True
    return 1 if failed else 0


def _cmd_list(kernel: AuthKernel) -> int:
    for at in kernel.list_auth_types():
        max_len = "unbounded" if at.max_tag_length is None else str(at.max_tag_length)
        print(f"{int(at.id)}\t{at.id.name}\t{max_len}\t{at.description}")
    return 0


def _cmd_tag(kernel: AuthKernel, args: argparse.Namespace) -> int:
    key = binascii.unhexlify(args.key)
    message = binascii.unhexlify(args.message)
    auth_type = kernel.get_auth_type(_TYPE_NAMES[args.type])
    tag_len = args.tag_len
    if tag_len is None:
        tag_len = auth_type.max_tag_length or 0
    with auth_type.alloc(len(key), tag_len) as auth:
        auth.init(key)
        auth.start()
        print(auth.compute(message).hex())
    return 0


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        kernel = default_kernel()
        _configure_debug(kernel, args)
        if args.cmd == "validate":
            return _cmd_validate(kernel)
        if args.cmd == "list":
            return _cmd_list(kernel)
        if args.cmd == "tag":
            return _cmd_tag(kernel, args)
    except (SrtpAuthError, binascii.Error) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
