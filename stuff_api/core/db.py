import logging
from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from stuff_api.core.config import Settings
from stuff_api.core.errors import StoreConnectionError, StoreError

logger = logging.getLogger(__name__)


class MongoStore:
    """Подключение к MongoDB, общее для всех запросов"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncMongoClient] = None

    async def connect(self) -> None:
        """Создание клиента и проверка соединения"""
        if self.settings.mongodb_url_from_env:
            logger.info("mongo db url read from environment")
        else:
            logger.info("using default mongo db url")

        timeout_ms = int(self.settings.mongodb_connect_timeout * 1000)
        try:
            self.client = AsyncMongoClient(
                self.settings.mongodb_url,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms
            )
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            await self.close()
            raise StoreConnectionError(str(e)) from e

        logger.info(
            f"Connected to MongoDB, using {self.settings.mongodb_database}.{self.settings.mongodb_collection}"
        )

    async def close(self) -> None:
        """Закрытие клиента"""
        if self.client is not None:
            await self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")

    @property
    def collection(self) -> AsyncCollection:
        """Коллекция, в которой хранятся записи"""
        if self.client is None:
            raise StoreError("Store is not connected")
        return self.client[self.settings.mongodb_database][self.settings.mongodb_collection]


def get_store(request: Request) -> MongoStore:
    """Зависимость для получения общего подключения к хранилищу"""
    return request.app.state.store
