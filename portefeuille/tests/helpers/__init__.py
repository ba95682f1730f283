"""Test doubles for wallet collaborators."""

from helpers.fake_bridge_relay import FakeBridgeRelay
from helpers.fake_browser_navigator import FakeBrowserNavigator
from helpers.fake_hardware_device import FakeHardwareDevice
from helpers.fake_injected_extension import FakeInjectedExtension
from helpers.recording_provider import RecordingProvider
from helpers.factories import TEST_CONTRACT_ID, make_metadata, transfer

__all__ = [
    "FakeBridgeRelay",
    "FakeBrowserNavigator",
    "FakeHardwareDevice",
    "FakeInjectedExtension",
    "RecordingProvider",
    "TEST_CONTRACT_ID",
    "make_metadata",
    "transfer",
]
