"""Handler for `diag`."""

from __future__ import annotations

from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import HostContext, Result


class DiagCommand:
    """Surface host query counters verbatim."""

    def __init__(self, host: HostContext, builder: ResultBuilder) -> None:
        self._host = host
        self._builder = builder

    def handle(self, argument: str) -> list[Result]:
        del argument
        return self._builder.single(
            f"Query Count: {self._host.query_count}",
            f"Avg. Query Time: {self._host.average_query_time_ms}ms",
        )
