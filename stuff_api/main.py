import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from stuff_api.api.http.health import router as health_router
from stuff_api.api.http.stuff import router as stuff_router
from stuff_api.api.middleware import JSONContentTypeMiddleware, TrailingSlashMiddleware
from stuff_api.core.config import Settings, settings as default_settings
from stuff_api.core.db import MongoStore
from stuff_api.core.errors import http_exception_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Подключение к MongoDB при старте и отключение при остановке"""
    # хранилище, переданное в create_app, принадлежит вызывающему коду
    owns_store = app.state.store is None
    if owns_store:
        app.state.store = MongoStore(app.state.settings)
        await app.state.store.connect()

    logger.info("stuff-api started")
    yield
    logger.info("stuff-api shutting down")

    if owns_store:
        await app.state.store.close()
        app.state.store = None


def create_app(settings: Optional[Settings] = None, store: Optional[MongoStore] = None) -> FastAPI:
    """Сборка приложения: маршруты, middleware, обработчики ошибок"""
    settings = settings or default_settings

    app = FastAPI(
        title="stuff-api",
        description="CRUD over a single MongoDB collection",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False
    )

    app.state.settings = settings
    app.state.store = store

    app.add_middleware(JSONContentTypeMiddleware)
    app.add_middleware(TrailingSlashMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health_router)
    app.include_router(stuff_router)

    return app


app = create_app()


def run() -> None:
    """Запуск HTTP-сервера"""
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
