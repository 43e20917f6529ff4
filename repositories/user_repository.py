"""User persistence. Stored records hold the password hash, never the plain password."""

from models.schemas import Pagination
from repositories.base import InMemoryRepository, Record
from utils.validators import SortSpec


class UserRepository(InMemoryRepository):
    resource_name = "User"
    unique_fields = ("email",)
    sort_keys = {
        "name": lambda r: f"{r.get('first_name', '')} {r.get('last_name', '')}",
        "email": lambda r: r.get("email"),
        "role": lambda r: r.get("role"),
    }

    async def get_all_users(self, pagination: Pagination, sorting: SortSpec) -> list[Record]:
        return await self.find_all(pagination, sorting)

    async def get_a_user_by_id(self, user_id: str) -> Record:
        return await self.get(user_id)

    async def get_a_user_by_email(self, email: str) -> Record | None:
        return await self.find_one(email=email)

    async def add_a_user(self, user: Record) -> Record:
        return await self.insert(user)

    async def add_an_user_address(self, user_id: str, address: Record) -> Record:
        return await self.apply(user_id, lambda record: record.setdefault("address", []).append(address))

    async def modify_a_user_by_id(self, user_id: str, changes: Record) -> Record:
        return await self.update(user_id, changes)

    async def delete_a_user_by_id(self, user_id: str) -> None:
        await self.delete(user_id)
