"""
BlueZ (bluetoothctl) 기반 데이터 접근

어댑터 상태 조회와 페어링 장치 목록 조회를 담당한다.
필수 도구: bluez (bluetoothctl)

`devices Paired` 는 BlueZ 5.65 이상에서만 지원된다.
그보다 오래된 bluetoothctl 에서는 `paired-devices` 로 다시 시도한다.
"""
import logging
import re
import subprocess
from typing import Dict, List, Optional

from bluetooth_hub.config import Settings, get_settings
from bluetooth_hub.errors import BluetoothCommandError
from bluetooth_hub.models.bluetooth_model import AdapterState, BOND_BONDED, PairedDeviceDescriptor


logger = logging.getLogger(__name__)

DEVICE_LINE_PATTERN = re.compile(r'^Device\s+([0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5})(?:\s+(.*))?$')
CLASS_PATTERN = re.compile(r'^Class:\s*(0x[0-9A-Fa-f]+)')


class BluetoothRepository:
    """
    bluetoothctl 과의 인터페이스
    AdapterStateProvider / PairedDeviceSource 를 함께 구현
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        """bluetoothctl 명령 실행"""
        return subprocess.run(
            [self.settings.bluetoothctl_path, *args],
            capture_output=True,
            text=True,
            timeout=self.settings.command_timeout
        )

    def current_state(self) -> AdapterState:
        """어댑터 상태 조회 (어댑터가 없어도 예외를 던지지 않음)"""
        try:
            result = self._run("show")
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("⚠️  어댑터 상태 확인 실패: %s", e)
            return AdapterState.UNAVAILABLE

        output = result.stdout + result.stderr
        if result.returncode != 0 or "No default controller" in output:
            return AdapterState.UNAVAILABLE

        for line in output.splitlines():
            line = line.strip()
            if line.startswith("Powered:"):
                powered = line.split(":", 1)[1].strip()
                return AdapterState.ENABLED if powered == "yes" else AdapterState.DISABLED

        return AdapterState.DISABLED

    def is_enabled(self) -> bool:
        """어댑터 사용 가능 여부"""
        return self.current_state() == AdapterState.ENABLED

    def paired_devices(self) -> List[PairedDeviceDescriptor]:
        """
        페어링된 장치 목록

        Raises:
            BluetoothCommandError: bluetoothctl 실행 실패
        """
        try:
            output = self._check_output("devices", "Paired")
        except BluetoothCommandError as e:
            logger.warning("⚠️  devices Paired 실패, paired-devices 로 재시도: %s", e)
            output = self._check_output("paired-devices")

        devices = []
        for line in output.splitlines():
            match = DEVICE_LINE_PATTERN.match(line.strip())
            if not match:
                continue

            address = match.group(1)
            info = self._device_info(address)
            devices.append(
                PairedDeviceDescriptor.from_class_of_device(
                    address=address,
                    class_of_device=info.get("class"),
                    name=info.get("name"),
                    bond_state=BOND_BONDED
                )
            )

        return devices

    def _device_info(self, address: str) -> Dict[str, object]:
        """bluetoothctl info 출력에서 이름과 Class 추출"""
        output = self._check_output("info", address)

        info: Dict[str, object] = {}
        for line in output.splitlines():
            line = line.strip()
            if line.startswith("Name:"):
                info["name"] = line.split(":", 1)[1].strip()
            else:
                match = CLASS_PATTERN.match(line)
                if match:
                    info["class"] = int(match.group(1), 16)

        return info

    def _check_output(self, *args: str) -> str:
        try:
            result = self._run(*args)
        except (OSError, subprocess.SubprocessError) as e:
            raise BluetoothCommandError(f"bluetoothctl {' '.join(args)}: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise BluetoothCommandError(
                f"bluetoothctl {' '.join(args)} exited with {result.returncode}: {detail}"
            )

        return result.stdout
