from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send


class TrailingSlashMiddleware:
    """Убирает завершающий "/" из пути до маршрутизации: /stuff/ == /stuff"""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope, path=path[:-1])
        await self.app(scope, receive, send)


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """Content-Type: application/json для каждого ответа"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        if "content-type" not in response.headers:
            response.headers["Content-Type"] = "application/json"
        return response
