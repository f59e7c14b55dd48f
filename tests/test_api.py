"""Tests for the HTTP routes."""

from bluetooth_hub.models.bluetooth_model import AdapterState, PairedDeviceDescriptor
from bluetooth_hub.routers.devices import get_bluetooth_service
from bluetooth_hub.services.bluetooth_service import BluetoothService


def override_service(app, repository):
    """Route the app to a service built on a fake repository."""
    app.dependency_overrides[get_bluetooth_service] = lambda: BluetoothService(repository)


class TestInfoRoutes:
    """Tests for service info routes."""

    def test_root(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert response.json()['endpoints']['bonded'] == '/api/devices/bonded'

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json() == {'status': 'healthy'}


class TestBondedDevices:
    """Tests for /api/devices/bonded."""

    def test_success(self, client, app, fake_repository, descriptors):
        override_service(app, fake_repository(devices=descriptors))

        response = client.get('/api/devices/bonded')

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['data']['count'] == 3
        assert body['data']['devices'][0] == {
            'name': 'Galaxy Buds',
            'address': 'AA:AA:AA:AA:AA:AA',
            'bondState': 12,
            'type': 0x0500,
            'deviceClass': 0x0704,
            'deviceType': 'Wearable Audio Device',
            'isWearable': True,
        }
        assert body['data']['devices'][2]['name'] is None

    def test_empty(self, client, app, fake_repository):
        override_service(app, fake_repository())

        response = client.get('/api/devices/bonded')

        assert response.status_code == 200
        assert response.json()['data'] == {'devices': [], 'count': 0}

    def test_adapter_unavailable(self, client, app, fake_repository, descriptors):
        repository = fake_repository(AdapterState.UNAVAILABLE, descriptors)
        override_service(app, repository)

        response = client.get('/api/devices/bonded')

        assert response.status_code == 503
        assert response.json() == {
            'success': False,
            'code': 'BLUETOOTH_NOT_AVAILABLE',
            'message': 'Bluetooth is not available or disabled',
        }
        assert repository.calls == 0

    def test_enumeration_failed(self, client, app, fake_repository):
        override_service(app, fake_repository(error=PermissionError('BLUETOOTH_CONNECT not granted')))

        response = client.get('/api/devices/bonded')

        assert response.status_code == 500
        body = response.json()
        assert body['code'] == 'ERROR'
        assert body['message'] == 'Failed to get bonded devices: BLUETOOTH_CONNECT not granted'
        assert 'data' not in body


class TestWearableDevices:
    """Tests for /api/devices/wearables."""

    def test_filters_on_is_wearable(self, client, app, fake_repository, descriptors):
        watch = PairedDeviceDescriptor.from_class_of_device('DD:DD:DD:DD:DD:DD', 0x240704, name='Galaxy Watch6')
        override_service(app, fake_repository(devices=descriptors + [watch]))

        response = client.get('/api/devices/wearables')

        assert response.status_code == 200
        devices = response.json()['data']['devices']
        assert [d['address'] for d in devices] == ['AA:AA:AA:AA:AA:AA', 'DD:DD:DD:DD:DD:DD']
        assert all(d['isWearable'] for d in devices)
        assert devices[1]['deviceType'] == 'Unknown'

    def test_disabled(self, client, app, fake_repository):
        override_service(app, fake_repository(AdapterState.DISABLED))

        response = client.get('/api/devices/wearables')

        assert response.status_code == 503
