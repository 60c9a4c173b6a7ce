# /shostspec/adapters/system/host_expander_impl.py
from __future__ import annotations

import logging

from shostspec.domain.errors import HostSpecError
from shostspec.domain.hostspec import expand_host

LOG = logging.getLogger("adapter.host_expander")


class HostExpander:
    def __init__(self, *, require_number: bool = False, max_hosts: int = 0) -> None:
        self.require_number = require_number
        self.max_hosts = max_hosts

    def expand(self, expression: str) -> list[str]:
        s = expression.strip()
        try:
            hosts = expand_host(
                s,
                require_number=self.require_number,
                limit=self.max_hosts or None,
            )
        except HostSpecError as e:
            LOG.info(
                "expression.rejected",
                extra={"extra": {"expression": s, "error": type(e).__name__, "detail": e.reason}},
            )
            raise

        LOG.info("expression.expanded", extra={"extra": {"expression": s, "out": len(hosts)}})
        return hosts
