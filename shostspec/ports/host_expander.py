# /shostspec/ports/host_expander.py
from __future__ import annotations

from typing import Protocol


class HostExpanderPort(Protocol):
    def expand(self, expression: str) -> list[str]:
        """Expand one host expression into host names, in emission order."""
