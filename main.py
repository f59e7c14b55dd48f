"""
Bluetooth Hub - FastAPI 메인 애플리케이션

사용 방법:
    uvicorn main:app --reload --host 0.0.0.0 --port 8000

API 문서:
    http://localhost:8000/docs
"""
import logging

from fastapi import FastAPI

from bluetooth_hub.config import get_settings
from bluetooth_hub.errors import EnumerationError
from bluetooth_hub.routers import devices


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title="Bluetooth Hub",
    version="1.0.0",
    description="페어링된 Bluetooth 웨어러블/헬스 장치 조회"
)

# 장치 라우터 등록
app.include_router(devices.router)
app.add_exception_handler(EnumerationError, devices.enumeration_error_handler)


@app.get("/", tags=["Health"])
def read_root():
    """API 정보 및 사용 가능한 엔드포인트"""
    return {
        "service": "Bluetooth Hub",
        "version": "1.0.0",
        "description": "페어링된 장치를 웨어러블 오디오 / 헬스 장치로 분류",
        "endpoints": {
            "bonded": "/api/devices/bonded",
            "wearables": "/api/devices/wearables",
            "docs": "/docs"
        }
    }


@app.get("/health", tags=["Health"])
def health_check():
    """헬스 체크"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
