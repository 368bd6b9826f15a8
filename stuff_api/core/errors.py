from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class StoreError(Exception):
    """Ошибка при обращении к хранилищу документов"""


class StoreConnectionError(StoreError):
    """Не удалось подключиться к хранилищу при старте"""


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Ответ на HTTPException в виде {"error": "..."}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )
