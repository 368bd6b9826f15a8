"""
Shared fixtures for stuff-api tests.

The HTTP tests never talk to MongoDB: the repository dependency is
replaced with an in-memory fake through ``app.dependency_overrides``.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from stuff_api.api.http.stuff import get_stuff_repository
from stuff_api.core.config import Settings
from stuff_api.core.errors import StoreError
from stuff_api.domains.stuff.entities import Stuff
from stuff_api.domains.stuff.ids import StuffId
from stuff_api.main import create_app


class InMemoryStuffRepository:
    """Repository fake with the same async interface as StuffRepository."""

    def __init__(self):
        self.documents: Dict[StuffId, dict] = {}
        self.failing = False

    def _check(self) -> None:
        if self.failing:
            raise StoreError("store is down")

    async def get_all(self) -> List[Stuff]:
        self._check()
        return [Stuff.from_document(doc) for doc in self.documents.values()]

    async def get_by_id(self, stuff_id: StuffId) -> Optional[Stuff]:
        self._check()
        document = self.documents.get(stuff_id)
        return Stuff.from_document(document) if document else None

    async def create(self, stuff: Stuff) -> Stuff:
        self._check()
        self.documents[stuff.id] = stuff.to_document()
        return stuff

    async def delete(self, stuff_id: StuffId) -> bool:
        self._check()
        return self.documents.pop(stuff_id, None) is not None


class FakeStore:
    """Stands in for MongoStore so the lifespan does not connect."""

    collection = None


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def repository() -> InMemoryStuffRepository:
    return InMemoryStuffRepository()


@pytest.fixture()
def client(settings, repository):
    """Test client wired to the in-memory repository."""
    app = create_app(settings=settings, store=FakeStore())
    app.dependency_overrides[get_stuff_repository] = lambda: repository

    with TestClient(app) as c:
        yield c
