from stuff_api.db.repositories.stuff_repository import StuffRepository

__all__ = [
    "StuffRepository"
]
