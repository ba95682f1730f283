"""Hardware device infrastructure."""

from portefeuille.infrastructure.devices.device_handle import DeviceHandle

__all__ = ["DeviceHandle"]
