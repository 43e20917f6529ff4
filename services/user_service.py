"""
User business logic: registration, login and profile changes.
Passwords are hashed here so repositories only ever see hashes.
"""

from typing import Any

from core.authorization import Role
from core.exceptions import UnauthorizedException
from core.security import create_access_token, hash_password, is_safe_for_log, verify_password
from models.schemas import Pagination
from models.user import Address, UserCreate, UserUpdate
from repositories.base import Record
from repositories.user_repository import UserRepository
from utils.logging import get_logger
from utils.validators import SortSpec

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    """Thin layer over UserRepository; one instance per app, injected into routes."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_all_users(self, pagination: Pagination, sorting: SortSpec) -> list[Record]:
        return await self.repository.get_all_users(pagination, sorting)

    async def get_a_user_by_id(self, user_id: str) -> Record:
        return await self.repository.get_a_user_by_id(user_id)

    async def get_a_user_by_email(self, email: str, password: str) -> dict[str, Any]:
        """
        Check credentials and issue an access token.
        Unknown email and wrong password fail with the same message.
        """
        user = await self.repository.get_a_user_by_email(email.lower())
        if user is None or not verify_password(password, user["password"]):
            logger.warning("login_failed", extra={"email": is_safe_for_log(email)})
            raise UnauthorizedException(INVALID_CREDENTIALS)
        token = create_access_token(user["id"], email=user["email"], role=user["role"])
        logger.info("login_succeeded", extra={"user_id": user["id"]})
        return {"token": token, "user": user}

    async def add_a_user(self, user: UserCreate) -> Record:
        data = user.model_dump()
        data["email"] = data["email"].lower()
        data["password"] = hash_password(user.password)
        data["role"] = Role(user.role).value
        created = await self.repository.add_a_user(data)
        logger.info("user_created", extra={"user_id": created["id"], "role": created["role"]})
        return created

    async def add_an_user_address(self, user_id: str, address: Address) -> Record:
        updated = await self.repository.add_an_user_address(user_id, address.model_dump())
        logger.info("user_address_added", extra={"user_id": user_id})
        return updated

    async def modify_a_user_by_id(self, user_id: str, user: UserUpdate) -> Record:
        changes = user.model_dump(exclude_unset=True, exclude_none=True)
        if "password" in changes:
            changes["password"] = hash_password(changes["password"])
        updated = await self.repository.modify_a_user_by_id(user_id, changes)
        logger.info("user_modified", extra={"user_id": user_id, "changed": sorted(changes)})
        return updated

    async def delete_a_user_by_id(self, user_id: str) -> None:
        await self.repository.delete_a_user_by_id(user_id)
        logger.info("user_deleted", extra={"user_id": user_id})

    async def ensure_admin(self, email: str, password: str) -> Record:
        """
        Create the seed admin account, or promote an existing account with that email to ADMIN.
        The password of an existing account is left alone.
        """
        existing = await self.repository.get_a_user_by_email(email.lower())
        if existing is not None:
            if existing["role"] == Role.ADMIN.value:
                return existing
            promoted = await self.repository.modify_a_user_by_id(existing["id"], {"role": Role.ADMIN.value})
            logger.warning("admin_promoted", extra={"user_id": promoted["id"]})
            return promoted
        admin = UserCreate(
            first_name="Admin",
            last_name="Admin",
            email=email,
            password=password,
            role=Role.ADMIN,
        )
        created = await self.add_a_user(admin)
        logger.info("admin_seeded", extra={"user_id": created["id"]})
        return created
