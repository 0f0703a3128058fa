"""Handlers for catalog search commands."""

from __future__ import annotations

from playdeck.commands.types import Result
from playdeck.runtime.search import SearchAggregator, SearchKind


class SearchCommand:
    """Route one search category through the shared aggregator."""

    def __init__(self, aggregator: SearchAggregator, kind: SearchKind) -> None:
        self._aggregator = aggregator
        self.kind = kind

    def handle(self, argument: str) -> list[Result]:
        return self._aggregator.search(self.kind, argument)
