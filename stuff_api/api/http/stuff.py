import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from stuff_api.core.db import MongoStore, get_store
from stuff_api.core.errors import StoreError
from stuff_api.db.repositories.stuff_repository import StuffRepository
from stuff_api.domains.stuff.ids import InvalidStuffIdError, StuffId
from stuff_api.domains.stuff.schemas import ErrorResponse, StuffCreate, StuffResponse
from stuff_api.domains.stuff.services import StuffService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stuff",
    tags=["stuff"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }
)


def get_stuff_repository(store: MongoStore = Depends(get_store)) -> StuffRepository:
    """Зависимость для получения репозитория записей"""
    try:
        return StuffRepository(store.collection)
    except StoreError as e:
        logger.error(f"Store unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Store unavailable"
        )


def parse_stuff_id(stuff_id: str) -> StuffId:
    """Разбор идентификатора из пути; некорректный id -> 400"""
    try:
        return StuffId.parse(stuff_id)
    except InvalidStuffIdError as e:
        logger.warning(str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("", response_model=List[StuffResponse], response_model_exclude_none=True)
async def list_stuff(repository: StuffRepository = Depends(get_stuff_repository)):
    """Получение всех записей"""
    stuff_service = StuffService(repository)

    try:
        items = await stuff_service.list_stuff()
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list stuff"
        )

    return [StuffResponse.from_entity(stuff) for stuff in items]


@router.post(
    "",
    response_model=StuffResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": StuffCreate.model_json_schema()}},
        }
    }
)
async def create_stuff(
    request: Request,
    response: Response,
    repository: StuffRepository = Depends(get_stuff_repository)
):
    """Создание записи"""
    # тело разбирается как JSON при любом Content-Type
    raw_body = await request.body()
    try:
        stuff_data = StuffCreate.model_validate_json(raw_body)
    except ValidationError as e:
        logger.warning(f"Could not decode stuff body: {e.errors()}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request body"
        )

    stuff_service = StuffService(repository)

    try:
        stuff = await stuff_service.create_stuff(stuff_data)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create stuff"
        )

    host = request.headers.get("host", "")
    response.headers["Location"] = f"{host}/stuff/{stuff.id}"

    return StuffResponse.from_entity(stuff)


@router.get(
    "/{stuff_id}",
    response_model=StuffResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
)
async def get_stuff(
    stuff_id: str,
    repository: StuffRepository = Depends(get_stuff_repository)
):
    """Получение записи по идентификатору"""
    parsed_id = parse_stuff_id(stuff_id)
    stuff_service = StuffService(repository)

    try:
        stuff = await stuff_service.get_stuff(parsed_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get stuff"
        )

    if not stuff:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stuff not found"
        )

    return StuffResponse.from_entity(stuff)


@router.delete(
    "/{stuff_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
)
async def delete_stuff(
    stuff_id: str,
    repository: StuffRepository = Depends(get_stuff_repository)
):
    """Удаление записи по идентификатору"""
    parsed_id = parse_stuff_id(stuff_id)
    stuff_service = StuffService(repository)

    try:
        deleted = await stuff_service.delete_stuff(parsed_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete stuff"
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stuff not found"
        )

    return Response(status_code=status.HTTP_200_OK)
