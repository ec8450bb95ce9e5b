# app/core/responses.py

"""
모든 엔드포인트가 공유하는 JSON 응답 봉투(envelope)를 생성하는 모듈입니다.

응답 형식: {exito, mensaje, datos?, codigo?, errores?, total?}

- success: 성공 응답 (기본 200). datos 가 리스트이면 total 을 함께 반환합니다.
- error: 일반 오류 응답 (기본 500).
- validation_failed: 입력값 검증 실패 (항상 400).
- not_found: 리소스 없음 (항상 404).
"""

from typing import Any, List

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

# 고정 오류 코드
GENERIC_ERROR = "GENERIC_ERROR"
VALIDATION_FAILED = "VALIDATION_FAILED"
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"


def success(
    datos: Any,
    mensaje: str = "Operation successful",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """성공 응답. total 은 datos 가 리스트일 때만 포함됩니다."""
    content = {
        "exito": True,
        "mensaje": mensaje,
        "datos": jsonable_encoder(datos),
    }
    if isinstance(datos, list):
        content["total"] = len(datos)
    return JSONResponse(status_code=status_code, content=content)


def error(
    mensaje: str,
    codigo: str = GENERIC_ERROR,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """일반 오류 응답. 원본 예외 메시지는 절대 포함하지 않습니다."""
    return JSONResponse(
        status_code=status_code,
        content={"exito": False, "mensaje": mensaje, "codigo": codigo},
    )


def validation_failed(
    errores: List[str],
    mensaje: str = "Invalid input data",
) -> JSONResponse:
    """입력값 검증 실패 응답 (400)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "exito": False,
            "mensaje": mensaje,
            "codigo": VALIDATION_FAILED,
            "errores": errores,
        },
    )


def not_found(mensaje: str = "Resource not found") -> JSONResponse:
    """리소스 없음 응답 (404)."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"exito": False, "mensaje": mensaje, "codigo": RESOURCE_NOT_FOUND},
    )
