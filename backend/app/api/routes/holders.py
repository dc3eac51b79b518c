from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_holder_service
from app.models.holder import Holder
from app.schemas.holder import HolderCreate, HolderRead, HolderUpdate
from app.services.errors import HolderNotFoundError, HolderValidationError
from app.services.holder import HolderService

router = APIRouter(prefix="/holders", tags=["holders"])


def _serialize_holder(holder: Holder) -> HolderRead:
    return HolderRead.model_validate(holder, from_attributes=True)


@router.get("", response_model=List[HolderRead])
def list_holders(
    include_deleted: bool = Query(True, alias="includeDeleted"),
    service: HolderService = Depends(get_holder_service),
) -> List[HolderRead]:
    holders = service.list_holders(include_deleted=include_deleted)
    return [_serialize_holder(holder) for holder in holders]


@router.post("", response_model=HolderRead, status_code=status.HTTP_201_CREATED)
def create_holder(
    payload: HolderCreate,
    service: HolderService = Depends(get_holder_service),
) -> HolderRead:
    try:
        holder = service.save_holder(Holder(**payload.model_dump()))
    except HolderValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_holder(holder)


@router.get("/{holder_id}", response_model=HolderRead)
def get_holder(
    holder_id: int,
    include_deleted: bool = Query(True, alias="includeDeleted"),
    service: HolderService = Depends(get_holder_service),
) -> HolderRead:
    holder = service.get_holder(holder_id, include_deleted=include_deleted)
    if not holder:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Holder not found")
    return _serialize_holder(holder)


@router.put("/{holder_id}", response_model=HolderRead)
def update_holder(
    holder_id: int,
    payload: HolderUpdate,
    service: HolderService = Depends(get_holder_service),
) -> HolderRead:
    try:
        holder = service.update_holder(holder_id, payload)
    except HolderNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _serialize_holder(holder)


@router.delete("/{holder_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_holder(
    holder_id: int,
    service: HolderService = Depends(get_holder_service),
) -> Response:
    try:
        service.delete_holder(holder_id)
    except HolderNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
