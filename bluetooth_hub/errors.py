"""
장치 조회 에러 정의

브리지 계층은 code / message 만 보고 응답을 만든다.
"""


class EnumerationError(Exception):
    """페어링 장치 조회 실패"""

    code = "ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class AdapterUnavailable(EnumerationError):
    """어댑터가 없거나 꺼져 있음"""

    code = "BLUETOOTH_NOT_AVAILABLE"

    def __init__(self):
        super().__init__("Bluetooth is not available or disabled")


class EnumerationFailed(EnumerationError):
    """장치 목록을 읽는 중 예기치 못한 오류"""

    code = "ERROR"

    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to get bonded devices: {cause}")
        self.cause = cause


class BluetoothCommandError(RuntimeError):
    """bluetoothctl 명령 실행 실패"""
