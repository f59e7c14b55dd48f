from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# 페어링 상태 코드 (Android BluetoothDevice 상수와 동일)
BOND_NONE = 10
BOND_BONDING = 11
BOND_BONDED = 12

# Class of Device 마스크
MAJOR_CLASS_MASK = 0x1F00
DEVICE_CLASS_MASK = 0x1FFC


class AdapterState(str, Enum):
    """어댑터 상태"""
    UNAVAILABLE = "unavailable"
    DISABLED = "disabled"
    ENABLED = "enabled"


class DeviceType(str, Enum):
    """분류된 장치 종류"""
    WEARABLE_AUDIO = "Wearable Audio Device"
    HEALTH = "Health Device"
    UNKNOWN = "Unknown"


class PairedDeviceDescriptor(BaseModel):
    """호스트에서 읽어온 페어링 장치 원본 정보"""
    name: Optional[str] = Field(None, description="장치 이름 (없을 수 있음)")
    address: str = Field(..., description="장치 MAC 주소")
    bond_state: int = Field(BOND_BONDED, description="페어링 상태 코드")
    major_device_class: int = Field(0, description="Major device class (예: 0x0500)")
    device_class: int = Field(0, description="Device class 비트값")

    @classmethod
    def from_class_of_device(
        cls,
        address: str,
        class_of_device: Optional[int],
        name: Optional[str] = None,
        bond_state: int = BOND_BONDED
    ) -> "PairedDeviceDescriptor":
        """
        24비트 Class of Device 값에서 descriptor 생성

        Android와 같은 방식으로 major class와 device class를 분리한다.
        CoD가 없으면 둘 다 0 (Miscellaneous).
        """
        cod = class_of_device or 0
        return cls(
            name=name,
            address=address,
            bond_state=bond_state,
            major_device_class=cod & MAJOR_CLASS_MASK,
            device_class=cod & DEVICE_CLASS_MASK
        )


class ClassifiedDevice(BaseModel):
    """분류가 끝난 장치 정보 (응답용)"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: Optional[str] = Field(None, description="장치 이름")
    address: str = Field(..., description="장치 MAC 주소")
    bond_state: int = Field(..., alias="bondState", description="페어링 상태 코드")
    major_device_class: int = Field(..., alias="type", description="Major device class")
    device_class: int = Field(..., alias="deviceClass", description="Device class 비트값")
    device_type: DeviceType = Field(..., alias="deviceType", description="분류 결과")
    is_wearable: bool = Field(False, alias="isWearable", description="웨어러블 여부")

    def to_payload(self) -> dict:
        """브리지 응답 형식 (camelCase 키)"""
        return self.model_dump(by_alias=True, mode="json")
