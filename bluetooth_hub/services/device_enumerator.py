"""
페어링된 장치 조회 + 분류 (핵심 로직)

어댑터 상태와 페어링 장치 목록을 받아 분류된 장치 목록을 만든다.
동기 함수이며 공유 상태가 없어서 여러 곳에서 동시에 호출해도 된다.
실패하면 부분 결과 없이 EnumerationError를 던진다.
"""
import logging
from typing import Callable, Iterable, List, Optional, Protocol, Union

from bluetooth_hub.errors import AdapterUnavailable, EnumerationError, EnumerationFailed
from bluetooth_hub.models.bluetooth_model import AdapterState, ClassifiedDevice, PairedDeviceDescriptor
from bluetooth_hub.services.device_classifier import classify, is_wearable


logger = logging.getLogger(__name__)

PairedDevices = Union[
    Iterable[PairedDeviceDescriptor],
    Callable[[], Iterable[PairedDeviceDescriptor]]
]


class AdapterStateProvider(Protocol):
    """어댑터 상태 제공자"""

    def current_state(self) -> AdapterState: ...

    def is_enabled(self) -> bool: ...


class PairedDeviceSource(Protocol):
    """페어링 장치 목록 제공자"""

    def paired_devices(self) -> Iterable[PairedDeviceDescriptor]: ...


class DeviceEnumerator:
    """
    페어링 장치 조회기

    adapter_provider / device_source 는 get_bonded_devices() 에서만 사용한다.
    enumerate() 는 이미 가져온 입력만으로 동작한다.
    """

    def __init__(
        self,
        adapter_provider: Optional[AdapterStateProvider] = None,
        device_source: Optional[PairedDeviceSource] = None
    ):
        self.adapter_provider = adapter_provider
        self.device_source = device_source

    def enumerate(self, adapter_state: AdapterState, paired_devices: PairedDevices) -> List[ClassifiedDevice]:
        """
        분류된 장치 목록 반환

        Args:
            adapter_state: 현재 어댑터 상태
            paired_devices: descriptor 목록, 또는 목록을 돌려주는 함수
                (어댑터가 켜져 있을 때만 호출됨)

        Returns:
            입력 순서 그대로의 ClassifiedDevice 목록

        Raises:
            AdapterUnavailable: 어댑터가 없거나 꺼져 있음
            EnumerationFailed: 목록을 읽는 중 오류
        """
        if adapter_state != AdapterState.ENABLED:
            raise AdapterUnavailable()

        try:
            if callable(paired_devices):
                paired_devices = paired_devices()

            devices = []
            for descriptor in paired_devices:
                devices.append(self._to_classified(descriptor))
        except EnumerationError:
            raise
        except Exception as e:
            raise EnumerationFailed(e) from e

        logger.debug("페어링 장치 %d개 분류 완료", len(devices))
        return devices

    def get_bonded_devices(self) -> List[ClassifiedDevice]:
        """연결된 제공자에서 상태와 목록을 읽어 조회"""
        if self.adapter_provider is None or self.device_source is None:
            raise ValueError("adapter_provider와 device_source가 필요합니다")

        state = self.adapter_provider.current_state()
        return self.enumerate(state, self.device_source.paired_devices)

    @staticmethod
    def _to_classified(descriptor: PairedDeviceDescriptor) -> ClassifiedDevice:
        return ClassifiedDevice(
            name=descriptor.name,
            address=descriptor.address,
            bond_state=descriptor.bond_state,
            major_device_class=descriptor.major_device_class,
            device_class=descriptor.device_class,
            device_type=classify(descriptor.major_device_class, descriptor.device_class),
            is_wearable=is_wearable(descriptor.major_device_class, descriptor.device_class, descriptor.name)
        )
