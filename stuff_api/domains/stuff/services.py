from typing import List, Optional

from stuff_api.db.repositories.stuff_repository import StuffRepository
from stuff_api.domains.stuff.entities import Stuff
from stuff_api.domains.stuff.ids import StuffId
from stuff_api.domains.stuff.schemas import StuffCreate


class StuffService:
    """Сервис для работы с записями stuff"""

    def __init__(self, repository: StuffRepository):
        self.repository = repository

    async def list_stuff(self) -> List[Stuff]:
        """Получение всех записей"""
        return await self.repository.get_all()

    async def get_stuff(self, stuff_id: StuffId) -> Optional[Stuff]:
        """Получение записи по идентификатору"""
        return await self.repository.get_by_id(stuff_id)

    async def create_stuff(self, stuff_data: StuffCreate) -> Stuff:
        """Создание записи; идентификатор всегда выдается заново"""
        stuff = Stuff.create_stuff(title=stuff_data.title, body=stuff_data.body)
        return await self.repository.create(stuff)

    async def delete_stuff(self, stuff_id: StuffId) -> bool:
        """Удаление записи"""
        return await self.repository.delete(stuff_id)
