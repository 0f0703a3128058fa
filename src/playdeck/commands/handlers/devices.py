"""Handler for `device`."""

from __future__ import annotations

from collections.abc import Callable

from playdeck.client.models import Device
from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext


class DeviceCommand:
    """List controllable devices; selecting one transfers playback."""

    def __init__(
        self,
        session: SessionContext,
        builder: ResultBuilder,
        *,
        service_name: str = "Spotify",
    ) -> None:
        self._session = session
        self._builder = builder
        self._service_name = service_name

    def handle(self, argument: str) -> list[Result]:
        """List unrestricted devices in provider order.

        Args:
            argument: Ignored.

        Returns:
            One result per device, or a reconnect hint when none are usable.
        """
        del argument
        devices = [
            device
            for device in self._session.client.list_devices()
            if not device.is_restricted
        ]
        if not devices:
            return self._builder.single(
                f"No devices found on {self._service_name}.",
                "Reconnect to API",
                self._builder.reconnect_action(),
            )
        return [
            self._builder.result(
                f"{device.type}  {device.name}",
                "Active Device" if device.is_active else "Inactive",
                self._select_action(device),
            )
            for device in devices
        ]

    def _select_action(self, device: Device) -> Callable[[], None]:
        return lambda: self._session.client.select_device(device.id)
