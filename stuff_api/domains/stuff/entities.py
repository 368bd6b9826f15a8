from typing import Any, Dict, Optional

from stuff_api.domains.stuff.ids import StuffId


class Stuff:
    """Сущность записи коллекции stuff"""

    def __init__(self, id: StuffId, title: str = "", body: str = ""):
        self.id = id
        self.title = title
        self.body = body

    @classmethod
    def create_stuff(cls, title: Optional[str] = None, body: Optional[str] = None) -> "Stuff":
        """Создание новой записи со свежим идентификатором"""
        return cls(id=StuffId.generate(), title=title or "", body=body or "")

    def to_document(self) -> Dict[str, Any]:
        """Преобразование в документ MongoDB, пустые поля не сохраняются"""
        document: Dict[str, Any] = {"_id": self.id.object_id}
        if self.title:
            document["title"] = self.title
        if self.body:
            document["body"] = self.body
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Stuff":
        """Преобразование документа MongoDB в сущность"""
        return cls(
            id=StuffId(document["_id"]),
            title=document.get("title") or "",
            body=document.get("body") or ""
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stuff):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Stuff(id={self.id}, title={self.title!r})"
