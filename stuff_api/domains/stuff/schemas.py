from pydantic import BaseModel, ConfigDict
from typing import Optional

from stuff_api.domains.stuff.entities import Stuff


class StuffCreate(BaseModel):
    """Схема для создания записи; присланный клиентом id отбрасывается"""
    title: Optional[str] = None
    body: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class StuffResponse(BaseModel):
    """Схема для ответа с данными записи"""
    id: str
    title: Optional[str] = None
    body: Optional[str] = None

    @classmethod
    def from_entity(cls, stuff: Stuff) -> "StuffResponse":
        # пустые поля превращаются в None и не попадают в JSON
        return cls(
            id=str(stuff.id),
            title=stuff.title or None,
            body=stuff.body or None
        )


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
