# /shostspec/domain/expansion_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from shostspec.domain.errors import HostSpecError
from shostspec.ports.host_expander import HostExpanderPort

LOG = logging.getLogger("expansion_service")

# ==== DTOs ====


@dataclass(slots=True)
class ExpansionRequestDTO:
    expressions: list[str]


@dataclass(slots=True)
class ExpansionResultDTO:
    index: int  # 1-based argument position
    expression: str
    hosts: list[str]


@dataclass(slots=True)
class ExpansionResponseDTO:
    results: list[ExpansionResultDTO]
    errors: list[dict]

    @property
    def hosts(self) -> list[str]:
        return [h for r in self.results for h in r.hosts]


# ==== Service ====


class ExpansionService:
    """Expands every expression of a request in order, over an injected expander."""

    def __init__(self, expander: HostExpanderPort, *, fail_fast: bool = False) -> None:
        self.expander = expander
        self.fail_fast = fail_fast

    @staticmethod
    def _error_entry(index: int, expression: str, e: HostSpecError) -> dict:
        return {
            "index": index,
            "expression": expression,
            "error": type(e).__name__,
            "detail": e.reason,
        }

    def expand(self, req: ExpansionRequestDTO) -> ExpansionResponseDTO:
        results: list[ExpansionResultDTO] = []
        errors: list[dict] = []

        for index, expression in enumerate(req.expressions, start=1):
            if not expression.strip():
                LOG.debug("expression.skipped_empty", extra={"extra": {"index": index}})
                continue
            try:
                hosts = self.expander.expand(expression)
            except HostSpecError as e:
                errors.append(self._error_entry(index, expression, e))
                if self.fail_fast:
                    LOG.info("expansion.stopped", extra={"extra": {"index": index}})
                    break
                continue
            results.append(ExpansionResultDTO(index=index, expression=expression, hosts=hosts))

        LOG.info(
            "expansion.done",
            extra={"extra": {"in": len(req.expressions), "ok": len(results), "failed": len(errors)}},
        )
        return ExpansionResponseDTO(results=results, errors=errors)
