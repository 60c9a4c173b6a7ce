# /shostspec/adapters/cli/main.py
from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from shostspec.adapters.system.host_expander_impl import HostExpander
from shostspec.adapters.system.logging_cfg import configure_logger
from shostspec.config import settings
from shostspec.domain.expansion_service import ExpansionRequestDTO, ExpansionService

LOG = logging.getLogger("adapter.cli")

PROG = "shostspec"


def _version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Expand host-range expressions such as 'host[120-150,999]', one host per line.",
        epilog="Example: shostspec 'gpu[001-004]' login7 | xargs -n1 ipmitool -H",
    )
    parser.add_argument("expressions", metavar="EXPR", nargs="+", help="Host expression to expand")
    parser.add_argument(
        "--fail-fast",
        action=argparse.BooleanOptionalAction,
        default=settings.FAIL_FAST,
        help="Stop at the first expression that fails (default: report all failures)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.REQUIRE_NUMBER,
        help="Reject literal hosts that do not end in a number",
    )
    parser.add_argument(
        "--max-hosts",
        type=_non_negative_int,
        default=settings.MAX_HOSTS,
        metavar="N",
        help="Refuse expressions expanding to more than N hosts, 0 disables (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="More logging on stderr (repeatable)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _log_level(verbose: int) -> int | str:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return settings.LOG_LEVEL


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(_log_level(args.verbose))

    svc = ExpansionService(
        HostExpander(require_number=args.strict, max_hosts=args.max_hosts),
        fail_fast=args.fail_fast,
    )
    resp = svc.expand(ExpansionRequestDTO(expressions=args.expressions))

    for result in resp.results:
        for host in result.hosts:
            print(host)

    for err in resp.errors:
        print(
            f"{PROG}: error at arg {err['index']} ({err['expression']!r}): {err['detail']}",
            file=sys.stderr,
        )

    if resp.errors:
        LOG.info("cli.failed", extra={"extra": {"failed": len(resp.errors)}})
        return 1
    return 0
