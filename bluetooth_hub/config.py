"""
설정 관리

환경변수 (BT_HUB_ 접두사)로 덮어쓸 수 있다.
예: BT_HUB_COMMAND_TIMEOUT=10
"""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bluetooth Hub 설정"""
    model_config = SettingsConfigDict(env_prefix="BT_HUB_")

    bluetoothctl_path: str = Field(
        default="bluetoothctl",
        description="bluetoothctl 실행 파일 경로"
    )
    command_timeout: float = Field(
        default=5.0,
        gt=0,
        description="bluetoothctl 명령 타임아웃 (초)"
    )
    host: str = Field(default="0.0.0.0", description="서버 바인딩 주소")
    port: int = Field(default=8000, description="서버 포트")
    log_level: str = Field(default="INFO", description="로그 레벨")


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤"""
    return Settings()
