"""
Hardware signing device interface.

Implementations wrap the physical transport (USB/HID/BLE). Framing is
the implementation's concern; the wallet only sees these operations.
"""

from abc import ABC, abstractmethod


class IHardwareDevice(ABC):
    """
    Abstract hardware signing device.

    Every method except is_supported performs device I/O and must only
    be called from connect or signing paths.
    """

    @abstractmethod
    def is_supported(self) -> bool:
        """
        Check if the host environment can talk to this device type.

        Must not touch the device.
        """

    @abstractmethod
    async def open(self) -> None:
        """
        Open a session with the device.

        Raises:
            SignerUnavailableError: If no device is plugged in
        """

    @abstractmethod
    async def close(self) -> None:
        """Close the device session."""

    @abstractmethod
    async def get_public_key(self, derivation_path: str) -> str:
        """
        Read the public key for a derivation path.

        Raises:
            RequestRejectedError: If the user declines on the device
        """

    @abstractmethod
    async def sign(self, payload: bytes, derivation_path: str) -> bytes:
        """
        Sign payload on the device.

        Args:
            payload: Serialized transaction bytes
            derivation_path: Key derivation path

        Returns:
            Signature bytes

        Raises:
            RequestRejectedError: If the user declines on the device
        """
