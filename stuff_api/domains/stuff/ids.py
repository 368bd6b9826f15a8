from bson import ObjectId
from bson.errors import InvalidId


class InvalidStuffIdError(ValueError):
    """Строка не является идентификатором записи"""


class StuffId:
    """Идентификатор записи: ObjectId MongoDB (12 байт, 24 hex-символа)"""

    __slots__ = ("_object_id",)

    def __init__(self, object_id: ObjectId):
        self._object_id = object_id

    @classmethod
    def generate(cls) -> "StuffId":
        """Новый уникальный идентификатор"""
        return cls(ObjectId())

    @classmethod
    def parse(cls, value: str) -> "StuffId":
        """Разбор hex-строки из URL"""
        if not isinstance(value, str) or len(value) != 24:
            raise InvalidStuffIdError(f"'{value}' is not a valid id")
        try:
            return cls(ObjectId(value))
        except (InvalidId, TypeError) as e:
            raise InvalidStuffIdError(f"'{value}' is not a valid id") from e

    @property
    def object_id(self) -> ObjectId:
        return self._object_id

    def __str__(self) -> str:
        return str(self._object_id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StuffId):
            return False
        return self._object_id == other._object_id

    def __hash__(self) -> int:
        return hash(self._object_id)

    def __repr__(self) -> str:
        return f"StuffId('{self}')"
