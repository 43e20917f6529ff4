"""Furniture persistence."""

from models.schemas import Pagination
from repositories.base import InMemoryRepository, Record
from utils.validators import SortSpec


class FurnitureRepository(InMemoryRepository):
    resource_name = "Furniture"
    sort_keys = {
        "name": lambda r: r.get("name"),
        "cost": lambda r: r.get("cost"),
        "stock": lambda r: r.get("stock"),
        "category": lambda r: r.get("category"),
    }

    async def get_all_furnitures(self, pagination: Pagination, sorting: SortSpec) -> list[Record]:
        return await self.find_all(pagination, sorting)

    async def get_a_furniture_by_id(self, furniture_id: str) -> Record:
        return await self.get(furniture_id)

    async def add_a_furniture(self, furniture: Record) -> Record:
        return await self.insert(furniture)

    async def modify_a_furniture_by_id(self, furniture_id: str, cost: float, stock: int) -> Record:
        return await self.update(furniture_id, {"cost": cost, "stock": stock})

    async def delete_a_furniture_by_id(self, furniture_id: str) -> None:
        await self.delete(furniture_id)
