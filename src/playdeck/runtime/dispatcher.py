"""Top-level query routing for the playback control surface."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from playdeck.client.base import PlaybackClient
from playdeck.commands.handlers.status import StatusCommand
from playdeck.commands.parser import Query, parse_query
from playdeck.commands.registry import CommandRegistry
from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import HostContext, Result
from playdeck.config import PlaydeckConfig
from playdeck.runtime.debounce import Debouncer, DebounceState
from playdeck.runtime.search import SearchAggregator, SearchKind
from playdeck.session.context import SessionContext

_LOGGER = logging.getLogger(__name__)


class QueryDispatcher:
    """Route raw queries to commands, searches, or the status view.

    ``dispatch`` never raises: unexpected faults are logged and rendered as
    the canonical "nothing found" result.
    """

    def __init__(  # noqa: PLR0913
        self,
        *,
        session: SessionContext,
        builder: ResultBuilder,
        registry: CommandRegistry,
        aggregator: SearchAggregator,
        debounce_state: DebounceState,
        debouncer: Debouncer,
        status: StatusCommand,
    ) -> None:
        """Create dispatcher from fully wired collaborators.

        Args:
            session: Shared playback session.
            builder: Result builder for canonical results.
            registry: Command table.
            aggregator: Search aggregator used for the global fallback.
            debounce_state: Latest-query state shared across dispatches.
            debouncer: Quiet-interval gate for expensive commands.
            status: Handler for the empty-command status view.
        """
        self._session = session
        self._builder = builder
        self._registry = registry
        self._aggregator = aggregator
        self._debounce_state = debounce_state
        self._debouncer = debouncer
        self._status = status

    @classmethod
    def build(
        cls,
        client: PlaybackClient,
        *,
        host: HostContext,
        config: PlaydeckConfig | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> QueryDispatcher:
        """Wire a dispatcher and its collaborators from config.

        Args:
            client: Remote playback client.
            host: Host context exposing directory and query counters.
            config: Optional config; defaults when omitted.
            clock: Nanosecond clock for debounce stamps.
            sleep: Blocking sleep used by the debounce gate.

        Returns:
            Ready-to-use dispatcher.
        """
        settings = config or PlaydeckConfig()
        session = SessionContext(client)
        builder = ResultBuilder(
            session,
            service_name=settings.service_name,
            icon_path=settings.icon_path,
        )
        aggregator = SearchAggregator(
            session, builder, max_workers=settings.search.artwork_workers
        )
        state = DebounceState(clock)
        return cls(
            session=session,
            builder=builder,
            registry=CommandRegistry(
                session=session,
                builder=builder,
                aggregator=aggregator,
                host=host,
                service_name=settings.service_name,
            ),
            aggregator=aggregator,
            debounce_state=state,
            debouncer=Debouncer(
                state,
                quiet_interval_ms=settings.debounce.quiet_interval_ms,
                enabled=settings.debounce.enabled,
                sleep=sleep,
            ),
            status=StatusCommand(
                session, builder, action_keyword=settings.action_keyword
            ),
        )

    def dispatch(self, query: Query | str) -> list[Result] | None:
        """Route one query and return displayable results.

        Args:
            query: Parsed query or raw input text.

        Returns:
            Result list, or ``None`` when a newer query superseded this one
            during the debounce interval.
        """
        ticket = self._debounce_state.mark()
        parsed = parse_query(query) if isinstance(query, str) else query
        try:
            return self._route(parsed, ticket)
        except Exception:
            _LOGGER.exception("Query %r failed", parsed.raw)
            return self._builder.nothing_found()

    def close(self) -> None:
        """Release worker threads held by the search aggregator."""
        self._aggregator.close()

    def _route(self, query: Query, ticket: int) -> list[Result] | None:
        client = self._session.client
        if not client.is_connected():
            return self._builder.unreachable()
        if not client.is_token_valid():
            return self._builder.token_expired()

        if not query.command:
            return self._status.handle("")

        handler = self._registry.resolve(query.command)
        expensive = self._registry.is_expensive(query.command)
        if handler is not None and not expensive:
            return handler.handle(query.argument)

        if self._debouncer.enabled and not self._debouncer.admit(ticket):
            return None

        if handler is not None:
            return handler.handle(query.argument)
        return self._aggregator.search(SearchKind.GLOBAL, query.text)
