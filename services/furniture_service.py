"""Furniture catalog operations. Each call forwards to the repository."""

from models.furniture import FurnitureCreate
from models.schemas import Pagination
from repositories.base import Record
from repositories.furniture_repository import FurnitureRepository
from utils.logging import get_logger
from utils.validators import SortSpec

logger = get_logger(__name__)


class FurnitureService:
    def __init__(self, repository: FurnitureRepository) -> None:
        self.repository = repository

    async def get_all_furnitures(self, pagination: Pagination, sorting: SortSpec) -> list[Record]:
        return await self.repository.get_all_furnitures(pagination, sorting)

    async def get_a_furniture_by_id(self, furniture_id: str) -> Record:
        return await self.repository.get_a_furniture_by_id(furniture_id)

    async def add_a_furniture(self, furniture: FurnitureCreate) -> Record:
        created = await self.repository.add_a_furniture(furniture.model_dump())
        logger.info("furniture_created", extra={"furniture_id": created["id"]})
        return created

    async def modify_a_furniture_by_id(self, furniture_id: str, cost: float, stock: int) -> Record:
        updated = await self.repository.modify_a_furniture_by_id(furniture_id, cost, stock)
        logger.info("furniture_modified", extra={"furniture_id": furniture_id, "cost": cost, "stock": stock})
        return updated

    async def delete_a_furniture_by_id(self, furniture_id: str) -> None:
        await self.repository.delete_a_furniture_by_id(furniture_id)
        logger.info("furniture_deleted", extra={"furniture_id": furniture_id})
