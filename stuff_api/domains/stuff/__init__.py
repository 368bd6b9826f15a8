from stuff_api.domains.stuff.ids import StuffId, InvalidStuffIdError
from stuff_api.domains.stuff.entities import Stuff
from stuff_api.domains.stuff.schemas import (
    StuffCreate, StuffResponse, HealthResponse, ErrorResponse
)
from stuff_api.domains.stuff.services import StuffService

__all__ = [
    "StuffId", "InvalidStuffIdError",
    "Stuff",
    "StuffCreate", "StuffResponse", "HealthResponse", "ErrorResponse",
    "StuffService"
]
