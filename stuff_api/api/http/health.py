from fastapi import APIRouter

from stuff_api.domains.stuff.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/test", response_model=HealthResponse)
async def health_check():
    """Проверка работоспособности, хранилище не опрашивается"""
    return HealthResponse(status="ok")
