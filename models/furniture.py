"""Furniture schemas."""

from pydantic import Field

from models.schemas import CamelModel


class FurnitureCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    category: str | None = None
    cost: float = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)


class FurnitureUpdate(CamelModel):
    """Only price and stock level change after creation."""

    cost: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)


class FurnitureOut(FurnitureCreate):
    id: str


class FurnituresResponse(CamelModel):
    furnitures: list[FurnitureOut]


class FurnitureResponse(CamelModel):
    furniture: FurnitureOut


class FurnitureResultResponse(CamelModel):
    result: FurnitureOut


class ModifiedFurnitureResponse(CamelModel):
    modified_furniture: FurnitureOut
