import logging
from typing import List, Optional, TYPE_CHECKING

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from stuff_api.core.errors import StoreError

if TYPE_CHECKING:
    from stuff_api.domains.stuff.entities import Stuff
    from stuff_api.domains.stuff.ids import StuffId

logger = logging.getLogger(__name__)


class StuffRepository:
    """Репозиторий для работы с коллекцией записей"""

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def get_all(self) -> List["Stuff"]:
        """Все записи в порядке, который вернет MongoDB"""
        try:
            documents = await self.collection.find({}).to_list()
        except PyMongoError as e:
            logger.error(f"Failed to query stuff: {e}")
            raise StoreError(str(e)) from e
        return [self._to_domain(document) for document in documents]

    async def get_by_id(self, stuff_id: "StuffId") -> Optional["Stuff"]:
        """Получение записи по идентификатору"""
        try:
            document = await self.collection.find_one({"_id": stuff_id.object_id})
        except PyMongoError as e:
            logger.error(f"Failed to find stuff {stuff_id}: {e}")
            raise StoreError(str(e)) from e
        return self._to_domain(document) if document else None

    async def create(self, stuff: "Stuff") -> "Stuff":
        """Сохранение новой записи"""
        try:
            await self.collection.insert_one(stuff.to_document())
        except PyMongoError as e:
            logger.error(f"Failed to insert stuff {stuff.id}: {e}")
            raise StoreError(str(e)) from e
        return stuff

    async def delete(self, stuff_id: "StuffId") -> bool:
        """Удаление записи; False, если удалять было нечего"""
        try:
            result = await self.collection.delete_one({"_id": stuff_id.object_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete stuff {stuff_id}: {e}")
            raise StoreError(str(e)) from e
        return result.deleted_count > 0

    def _to_domain(self, document: dict) -> "Stuff":
        """Преобразование документа MongoDB в доменную сущность"""
        from stuff_api.domains.stuff.entities import Stuff

        return Stuff.from_document(document)
