"""Handler for `vol` / `volume`."""

from __future__ import annotations

import re

from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext

_MIN_VOLUME = 0
_MAX_VOLUME = 100
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_volume(argument: str) -> int | None:
    """Parse an in-range volume percentage, or return ``None``."""
    text = argument.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if _MIN_VOLUME <= value <= _MAX_VOLUME:
        return value
    return None


class VolumeCommand:
    """Show current volume or offer to set a new one."""

    def __init__(self, session: SessionContext, builder: ResultBuilder) -> None:
        self._session = session
        self._builder = builder

    def handle(self, argument: str) -> list[Result]:
        """Offer a volume change for valid input, else show current volume.

        Args:
            argument: Requested volume percentage text.

        Returns:
            Single volume result.
        """
        target = _parse_volume(argument)
        if target is not None:
            return self._builder.single(
                f"Set Volume to {target}",
                f"Current Volume: {self._session.cached_volume}",
                lambda: self._session.set_volume(target),
            )
        current = self._session.refresh_volume()
        return self._builder.single("Volume", f"Current Volume: {current}")
