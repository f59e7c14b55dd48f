"""
페어링 장치 조회 라우터
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bluetooth_hub.errors import AdapterUnavailable, EnumerationError
from bluetooth_hub.models.schema import ApiResponse, ErrorResponse
from bluetooth_hub.repositories.bluetooth_repository import BluetoothRepository
from bluetooth_hub.services.bluetooth_service import BluetoothService


router = APIRouter(prefix="/api/devices", tags=["Devices"])


def get_bluetooth_service() -> BluetoothService:
    """Dependency Injection"""
    return BluetoothService(BluetoothRepository())


async def enumeration_error_handler(request: Request, exc: EnumerationError) -> JSONResponse:
    """EnumerationError → JSON 에러 응답"""
    status_code = 503 if isinstance(exc, AdapterUnavailable) else 500
    body = ErrorResponse(code=exc.code, message=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get(
    "/bonded",
    response_model=ApiResponse,
    responses={503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_bonded_devices(service: BluetoothService = Depends(get_bluetooth_service)):
    """페어링된 장치 목록 (분류 포함)"""
    devices = await service.get_bonded_devices()

    return ApiResponse(
        success=True,
        message=f"{len(devices)}개 페어링된 장치",
        data={
            "devices": [device.to_payload() for device in devices],
            "count": len(devices)
        }
    )


@router.get(
    "/wearables",
    response_model=ApiResponse,
    responses={503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_wearable_devices(service: BluetoothService = Depends(get_bluetooth_service)):
    """웨어러블 장치 목록"""
    devices = await service.get_wearable_devices()

    return ApiResponse(
        success=True,
        message=f"{len(devices)}개 웨어러블 장치",
        data={
            "devices": [device.to_payload() for device in devices],
            "count": len(devices)
        }
    )
