from typing import Any, Optional
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """API 응답"""
    success: bool = Field(..., description="성공 여부")
    message: str = Field(..., description="응답 메시지")
    data: Optional[Any] = Field(None, description="응답 데이터")


class ErrorResponse(BaseModel):
    """API 에러 응답"""
    success: bool = Field(False, description="성공 여부")
    code: str = Field(..., description="에러 코드 (예: BLUETOOTH_NOT_AVAILABLE)")
    message: str = Field(..., description="에러 메시지")
