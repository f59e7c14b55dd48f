"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bluetooth_hub.models.bluetooth_model import AdapterState, PairedDeviceDescriptor


class FakeRepository:
    """In-memory adapter state provider and paired device source."""

    def __init__(self, state=AdapterState.ENABLED, devices=None, error=None):
        self.state = state
        self.devices = devices or []
        self.error = error
        self.calls = 0

    def current_state(self):
        return self.state

    def is_enabled(self):
        return self.state == AdapterState.ENABLED

    def paired_devices(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.devices)


@pytest.fixture
def descriptors():
    """Three paired devices: wearable headset, health device, keyboard."""
    return [
        PairedDeviceDescriptor(
            name='Galaxy Buds', address='AA:AA:AA:AA:AA:AA',
            bond_state=12, major_device_class=0x0500, device_class=0x0704
        ),
        PairedDeviceDescriptor(
            name='Pulse Oximeter', address='BB:BB:BB:BB:BB:BB',
            bond_state=12, major_device_class=0x0900, device_class=0x0000
        ),
        PairedDeviceDescriptor(
            name=None, address='CC:CC:CC:CC:CC:CC',
            bond_state=12, major_device_class=0x0300, device_class=0x0540
        ),
    ]


@pytest.fixture
def fake_repository():
    return FakeRepository


@pytest.fixture
def app():
    """FastAPI application with dependency overrides cleared after each test."""
    from main import app as fastapi_app
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client
