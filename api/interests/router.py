"""
Interest API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import schemas, service
from .dependencies import get_store
from .store import InterestStore

router = APIRouter(prefix="/api/interests")


@router.get("", response_model=schemas.ListInterestsResponse)
async def list_interests(store: InterestStore = Depends(get_store)) -> schemas.ListInterestsResponse:
    data = await service.list_interests(store)
    return schemas.ListInterestsResponse(data=data)


@router.post("", response_model=schemas.InterestIdResponse)
async def create_interest(
    payload: schemas.InterestFields,
    store: InterestStore = Depends(get_store),
) -> schemas.InterestIdResponse:
    interest_id = await service.create_interest(store, payload)
    return schemas.InterestIdResponse(data=schemas.InterestIdData(id=interest_id))


@router.get("/{interest_id}", response_model=schemas.InterestResponse)
async def get_interest(
    interest_id: int,
    store: InterestStore = Depends(get_store),
) -> schemas.InterestResponse:
    interest = await service.get_interest(store, interest_id)
    return schemas.InterestResponse(data=interest)


@router.put("/{interest_id}", response_model=schemas.InterestIdResponse)
async def update_interest(
    interest_id: int,
    payload: schemas.InterestFields,
    store: InterestStore = Depends(get_store),
) -> schemas.InterestIdResponse:
    updated_id = await service.update_interest(store, interest_id, payload)
    return schemas.InterestIdResponse(data=schemas.InterestIdData(id=updated_id))


@router.delete("/{interest_id}", response_model=schemas.MessageResponse)
async def delete_interest(
    interest_id: int,
    store: InterestStore = Depends(get_store),
) -> schemas.MessageResponse:
    await service.delete_interest(store, interest_id)
    return schemas.MessageResponse(message="Interest deleted successfully")
