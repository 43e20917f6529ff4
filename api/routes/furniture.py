"""
Furniture catalog endpoints. Reads are public; changes need an ADMIN token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from core.authorization import Role
from core.dependencies import FurnitureServiceDep, ObjectId, PaginationDep, require_roles, sorting
from models.furniture import (
    FurnitureCreate,
    FurnitureOut,
    FurnitureResponse,
    FurnitureResultResponse,
    FurnituresResponse,
    FurnitureUpdate,
    ModifiedFurnitureResponse,
)
from repositories.furniture_repository import FurnitureRepository
from utils.validators import SortSpec

router = APIRouter(prefix="/furniture", tags=["furniture"])

AdminOnly = Annotated[dict, Depends(require_roles(Role.ADMIN))]
FurnitureSorting = Annotated[SortSpec, Depends(sorting(FurnitureRepository.sortable_fields()))]


@router.get("", response_model=FurnituresResponse)
async def get_all_furnitures(
    service: FurnitureServiceDep,
    pagination: PaginationDep,
    sort: FurnitureSorting,
) -> FurnituresResponse:
    furnitures = await service.get_all_furnitures(pagination, sort)
    return FurnituresResponse(furnitures=[FurnitureOut.model_validate(f) for f in furnitures])


@router.get("/{furniture_id}", response_model=FurnitureResponse)
async def get_a_furniture_by_id(furniture_id: ObjectId, service: FurnitureServiceDep) -> FurnitureResponse:
    furniture = await service.get_a_furniture_by_id(furniture_id)
    return FurnitureResponse(furniture=FurnitureOut.model_validate(furniture))


@router.post("", response_model=FurnitureResultResponse, status_code=status.HTTP_201_CREATED)
async def add_a_furniture(
    body: FurnitureCreate,
    service: FurnitureServiceDep,
    payload: AdminOnly,
) -> FurnitureResultResponse:
    result = await service.add_a_furniture(body)
    return FurnitureResultResponse(result=FurnitureOut.model_validate(result))


@router.put("/{furniture_id}", response_model=ModifiedFurnitureResponse)
async def modify_a_furniture_by_id(
    furniture_id: ObjectId,
    body: FurnitureUpdate,
    service: FurnitureServiceDep,
    payload: AdminOnly,
) -> ModifiedFurnitureResponse:
    """Cost and stock are the only fields that change after creation."""
    modified = await service.modify_a_furniture_by_id(furniture_id, body.cost, body.stock)
    return ModifiedFurnitureResponse(modified_furniture=FurnitureOut.model_validate(modified))


@router.delete("/{furniture_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_a_furniture_by_id(
    furniture_id: ObjectId,
    service: FurnitureServiceDep,
    payload: AdminOnly,
) -> Response:
    await service.delete_a_furniture_by_id(furniture_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
