import asyncio
import logging
from typing import List

from bluetooth_hub.errors import EnumerationError
from bluetooth_hub.models.bluetooth_model import ClassifiedDevice
from bluetooth_hub.repositories.bluetooth_repository import BluetoothRepository
from bluetooth_hub.services.device_enumerator import DeviceEnumerator


logger = logging.getLogger(__name__)


class BluetoothService:
    """
    비즈니스 로직 처리
    Repository와 Presentation 사이의 중간 계층
    """

    def __init__(self, repository: BluetoothRepository):
        self.repo = repository
        self.enumerator = DeviceEnumerator(
            adapter_provider=repository,
            device_source=repository
        )

    async def get_bonded_devices(self) -> List[ClassifiedDevice]:
        """
        페어링된 장치 조회 및 분류
        bluetoothctl 호출이 블로킹이라 executor에서 실행
        """
        loop = asyncio.get_event_loop()
        try:
            devices = await loop.run_in_executor(None, self.enumerator.get_bonded_devices)
        except EnumerationError as e:
            logger.error("❌ %s: %s", e.code, e.message)
            raise

        logger.info("📱 페어링된 장치 %d개", len(devices))
        return devices

    async def get_wearable_devices(self) -> List[ClassifiedDevice]:
        """웨어러블 장치만 조회 (isWearable 기준)"""
        devices = await self.get_bonded_devices()
        return [device for device in devices if device.is_wearable]
