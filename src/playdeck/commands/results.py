"""Uniform result-list construction."""

from __future__ import annotations

import logging
from collections.abc import Callable

from playdeck.client.errors import PlaybackClientError
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext

_LOGGER = logging.getLogger(__name__)


def _wrap_action(action: Callable[[], object] | None) -> Callable[[], bool]:
    """Wrap a side-effecting callable into a selection callback.

    Args:
        action: Optional zero-argument callable. Boolean return values are
            passed through; any other return value counts as success. Client
            errors are logged and reported as failure.

    Returns:
        Callback returning selection success.
    """

    def _select() -> bool:
        if action is None:
            return True
        try:
            outcome = action()
        except PlaybackClientError as exc:
            _LOGGER.warning("Selection failed (%s): %s", exc.code.value, exc)
            return False
        if isinstance(outcome, bool):
            return outcome
        return True

    return _select


class ResultBuilder:
    """Build single-entry and canonical result lists with default icons."""

    def __init__(
        self,
        session: SessionContext,
        *,
        service_name: str = "Spotify",
        icon_path: str = "icon.png",
    ) -> None:
        """Store session and presentation defaults.

        Args:
            session: Session used by reconnect actions.
            service_name: Remote service name shown in messages.
            icon_path: Icon reference used when a result has no artwork.
        """
        self._session = session
        self._service_name = service_name
        self.icon_path = icon_path

    def result(
        self,
        title: str,
        subtitle: str = "",
        action: Callable[[], object] | None = None,
        *,
        icon: str | None = None,
    ) -> Result:
        """Build one result entry.

        Args:
            title: Primary text.
            subtitle: Secondary text.
            action: Optional side effect run on selection.
            icon: Optional icon reference; defaults to the plugin icon.

        Returns:
            Immutable result entry.
        """
        return Result(
            title=title,
            subtitle=subtitle,
            icon=icon or self.icon_path,
            action=_wrap_action(action),
        )

    def single(
        self,
        title: str,
        subtitle: str = "",
        action: Callable[[], object] | None = None,
    ) -> list[Result]:
        """Build a one-entry result list."""
        return [self.result(title, subtitle, action)]

    def reconnect_action(self, *, keep_token: bool = True) -> Callable[[], bool]:
        """Return a callback reconnecting the session and reporting success.

        Args:
            keep_token: Whether the stored refresh token may be reused.

        Returns:
            Callback returning reconnect success.
        """

        def _reconnect() -> bool:
            return self._session.reconnect(keep_token=keep_token).ok

        return _reconnect

    def unreachable(self) -> list[Result]:
        """Result offering reconnection when the API is not connected."""
        return self.single(
            f"{self._service_name} API unreachable",
            "Select to re-authorize",
            self.reconnect_action(),
        )

    def token_expired(self) -> list[Result]:
        """Result offering reconnection when the access token is invalid."""
        return self.single(
            f"{self._service_name} API Token Expired",
            "Select to re-authorize",
            self.reconnect_action(),
        )

    def auth_required(self) -> list[Result]:
        """Result shown when a search is attempted without a connection."""
        return self.single(
            f"Authentication required to search the {self._service_name} library",
            "Click this to authenticate",
            self.reconnect_action(),
        )

    def nothing_found(self) -> list[Result]:
        """Canonical result for searches and faults that produced nothing."""
        return self.single(
            f"No results found on {self._service_name}.",
            "Please try refining your search",
        )
