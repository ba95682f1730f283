"""
Scoped hardware device handle.

The device is opened lazily on first use inside connect or signing and
released unconditionally on disconnect, including error paths.
"""

from typing import Optional

from portefeuille.domain.exceptions import RequestRejectedError
from portefeuille.domain.services.i_hardware_device import IHardwareDevice
from portefeuille.infrastructure.reporting import Emoji, SystemReporter


class DeviceHandle:
    """
    Exclusively owned device session for one wallet session.

    Usage:
        async with handle as device:
            signature = await device.sign(payload, path)

    Leaving the context normally or through a user rejection keeps the
    device open for the rest of the wallet session. Any other error
    releases it, so the next use reopens the device.
    """

    def __init__(
        self,
        device: IHardwareDevice,
        reporter: Optional[SystemReporter] = None,
    ):
        self._device = device
        self.reporter = reporter
        self._open = False

    @property
    def is_open(self) -> bool:
        """Check if the device session is currently open."""
        return self._open

    async def acquire(self) -> IHardwareDevice:
        """
        Open the device if not already open.

        Returns:
            The opened device

        Raises:
            SignerUnavailableError: If the device cannot be opened
        """
        if not self._open:
            await self._device.open()
            self._open = True
            if self.reporter:
                self.reporter.debug(
                    f"{Emoji.WALLET.DEVICE} Device session opened",
                    context="DeviceHandle",
                )
        return self._device

    async def release(self) -> None:
        """
        Close the device session.

        Always leaves the handle released; a failing close is reported.
        """
        if not self._open:
            return

        self._open = False
        try:
            await self._device.close()
        except Exception as e:
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.WARNING} Device close failed: {e}",
                    context="DeviceHandle",
                )
        else:
            if self.reporter:
                self.reporter.debug(
                    f"{Emoji.WALLET.DEVICE} Device session released",
                    context="DeviceHandle",
                )

    async def __aenter__(self) -> IHardwareDevice:
        return await self.acquire()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        # A user rejection leaves the device usable; any other failure
        # (unplugged, transport error) drops the session
        if exc_type is not None and not issubclass(exc_type, RequestRejectedError):
            await self.release()
        return False
