from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(data: Any = None, message: Optional[str] = None) -> dict:
    """Стандартный конверт успешного ответа"""
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonable_encoder(body)


def failure(status_code: int, error: str) -> JSONResponse:
    """Стандартный конверт ошибки"""
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})
