"""
Repository and service unit tests. Async calls run through asyncio.run.
"""

import asyncio

import pytest

from core.exceptions import ConflictException, IdNotFoundException, UnauthorizedException
from models.furniture import FurnitureCreate
from models.schemas import Pagination
from models.user import Address, UserCreate, UserUpdate
from repositories import FurnitureRepository, UserRepository
from repositories.base import new_object_id
from services.furniture_service import FurnitureService
from services.user_service import UserService
from utils.validators import SortSpec, is_object_id, parse_sort


def test_new_object_id_format() -> None:
    ids = {new_object_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(is_object_id(i) for i in ids)


def test_parse_sort() -> None:
    allowed = frozenset({"name", "cost"})
    assert parse_sort("+name", allowed) == SortSpec("name", False)
    assert parse_sort("-cost", allowed) == SortSpec("cost", True)
    assert parse_sort("name", allowed) == SortSpec("name", False)
    with pytest.raises(ValueError):
        parse_sort("+stock", allowed)
    with pytest.raises(ValueError):
        parse_sort("--name", allowed)


def test_reads_return_copies() -> None:
    async def scenario() -> None:
        repo = FurnitureRepository()
        created = await repo.add_a_furniture({"name": "Bench", "cost": 80.0, "stock": 2})
        created["name"] = "changed"
        fetched = await repo.get_a_furniture_by_id(created["id"])
        assert fetched["name"] == "Bench"

    asyncio.run(scenario())


def test_update_unknown_id_raises() -> None:
    repo = FurnitureRepository()
    with pytest.raises(IdNotFoundException):
        asyncio.run(repo.modify_a_furniture_by_id(new_object_id(), 1.0, 1))


def test_furniture_service_forwards_to_repository() -> None:
    async def scenario() -> None:
        service = FurnitureService(FurnitureRepository())
        created = await service.add_a_furniture(FurnitureCreate(name="Shelf", cost=60, stock=3))
        modified = await service.modify_a_furniture_by_id(created["id"], 55.0, 10)
        assert (modified["cost"], modified["stock"]) == (55.0, 10)
        page = await service.get_all_furnitures(Pagination(page=0, size=5), SortSpec("name"))
        assert [f["name"] for f in page] == ["Shelf"]
        await service.delete_a_furniture_by_id(created["id"])
        with pytest.raises(IdNotFoundException):
            await service.get_a_furniture_by_id(created["id"])

    asyncio.run(scenario())


def _user(**overrides) -> UserCreate:
    data = {
        "first_name": "Grace",
        "last_name": "Hopper",
        "email": "grace@example.com",
        "password": "cobol-forever",
    }
    data.update(overrides)
    return UserCreate(**data)


def test_user_service_hashes_password_and_logs_in() -> None:
    async def scenario() -> None:
        repo = UserRepository()
        service = UserService(repo)
        created = await service.add_a_user(_user())
        assert created["password"] != "cobol-forever"
        result = await service.get_a_user_by_email("grace@example.com", "cobol-forever")
        assert result["token"]
        assert result["user"]["id"] == created["id"]
        with pytest.raises(UnauthorizedException):
            await service.get_a_user_by_email("grace@example.com", "wrong-password")

    asyncio.run(scenario())


def test_user_service_rejects_duplicate_email() -> None:
    async def scenario() -> None:
        service = UserService(UserRepository())
        await service.add_a_user(_user())
        with pytest.raises(ConflictException):
            await service.add_a_user(_user(email="Grace@Example.com"))

    asyncio.run(scenario())


def test_user_service_partial_update_and_address() -> None:
    async def scenario() -> None:
        service = UserService(UserRepository())
        created = await service.add_a_user(_user(phone="555-0199"))
        modified = await service.modify_a_user_by_id(created["id"], UserUpdate(last_name="Murray"))
        assert modified["last_name"] == "Murray"
        assert modified["phone"] == "555-0199"
        assert modified["password"] == created["password"]
        address = Address(country="US", state="VA", street="Navy St", city="Arlington")
        with_address = await service.add_an_user_address(created["id"], address)
        assert with_address["address"][-1]["city"] == "Arlington"

    asyncio.run(scenario())


def test_ensure_admin_is_idempotent() -> None:
    async def scenario() -> None:
        service = UserService(UserRepository())
        first = await service.ensure_admin("root@example.com", "super-secret")
        second = await service.ensure_admin("root@example.com", "super-secret")
        assert first["id"] == second["id"]
        assert first["role"] == "ADMIN"

    asyncio.run(scenario())


def test_ensure_admin_promotes_existing_user() -> None:
    async def scenario() -> None:
        service = UserService(UserRepository())
        user = await service.add_a_user(_user(email="root@example.com"))
        assert user["role"] == "USER"
        admin = await service.ensure_admin("root@example.com", "super-secret")
        assert admin["id"] == user["id"]
        assert admin["role"] == "ADMIN"
        assert admin["password"] == user["password"]

    asyncio.run(scenario())


def test_object_id_counter_uses_full_three_bytes(monkeypatch) -> None:
    import itertools

    import repositories.base as base

    monkeypatch.setattr(base, "_counter", itertools.count(0xFFFFFF))
    assert base.new_object_id().endswith("ffffff")
    assert base.new_object_id().endswith("000000")
