"""
Class of Device 기반 장치 분류

Android 플랫폼 상수에서 가져온 휴리스틱:
- AUDIO_VIDEO (0x0500) + wearable headset 비트 (0x0704) → 웨어러블 오디오
- HEALTH (0x0900) → 헬스 장치
- 나머지 → Unknown

is_wearable() 은 별도의 넓은 휴리스틱이며 classify() 결과와 독립적이다.
"""
from typing import Optional

from bluetooth_hub.models.bluetooth_model import DeviceType


MAJOR_AUDIO_VIDEO = 0x0500
MAJOR_HEALTH = 0x0900

WEARABLE_HEADSET_MASK = 0x0704


def classify(major_device_class: int, device_class: int) -> DeviceType:
    """major class / device class로 장치 종류 판별"""
    if major_device_class == MAJOR_AUDIO_VIDEO:
        if (device_class & WEARABLE_HEADSET_MASK) == WEARABLE_HEADSET_MASK:
            return DeviceType.WEARABLE_AUDIO
    elif major_device_class == MAJOR_HEALTH:
        # 세부 비트는 보지 않음
        return DeviceType.HEALTH

    return DeviceType.UNKNOWN


# 웨어러블 판별용 Android BluetoothClass 상수
MAJOR_WEARABLE = 0x0700
MAJOR_PERIPHERAL = 0x0500
MAJOR_AV = 0x0400
AV_WEARABLE_HEADSET = 0x0404

WEARABLE_NAME_KEYWORDS = ("watch", "galaxy", "fit", "band")


def is_wearable(major_device_class: int, device_class: int, name: Optional[str] = None) -> bool:
    """
    웨어러블 여부 판별 (Galaxy Watch 등)

    - WEARABLE major class → True
    - AUDIO_VIDEO (0x0400) → (device_class & 0x0404) != 0 이면 True
      (device_class 에 major 비트가 포함되므로 사실상 모든 AV 장치)
    - PERIPHERAL → True (peripheral로 잡히는 워치가 있음)
    - 그 외 (CoD 없음 포함) → 이름에 watch / galaxy / fit / band 포함 여부
    """
    if major_device_class == MAJOR_WEARABLE:
        return True
    if major_device_class == MAJOR_AV:
        return (device_class & AV_WEARABLE_HEADSET) != 0
    if major_device_class == MAJOR_PERIPHERAL:
        return True

    lowered = (name or "").lower()
    return any(keyword in lowered for keyword in WEARABLE_NAME_KEYWORDS)
