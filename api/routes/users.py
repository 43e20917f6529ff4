"""
User endpoints: listing, lookup, login, registration, profile and address updates.
Role checks run as dependencies; ownership checks run in the handler.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from core.authorization import Role, is_allowed, is_owner_or_admin
from core.dependencies import (
    CurrentUserOptional,
    ObjectId,
    PaginationDep,
    UserServiceDep,
    require_roles,
    sorting,
)
from core.exceptions import ForbiddenException
from models.user import (
    Address,
    LoginRequest,
    LoginResponse,
    LoginResult,
    ModifiedUserResponse,
    UserCreate,
    UserOut,
    UserResponse,
    UserResultResponse,
    UsersResponse,
    UserUpdate,
)
from repositories.user_repository import UserRepository
from utils.validators import SortSpec

router = APIRouter(prefix="/users", tags=["users"])

AdminOnly = Annotated[dict, Depends(require_roles(Role.ADMIN))]
UserOnly = Annotated[dict, Depends(require_roles(Role.USER))]
UserOrAdmin = Annotated[dict, Depends(require_roles(Role.USER, Role.ADMIN))]
UserSorting = Annotated[SortSpec, Depends(sorting(UserRepository.sortable_fields()))]


def _ensure_owner(payload: dict, user_id: str) -> None:
    if not is_owner_or_admin(payload, user_id):
        raise ForbiddenException("You can only access your own account")


@router.get("", response_model=UsersResponse)
async def get_all_users(
    service: UserServiceDep,
    payload: AdminOnly,
    pagination: PaginationDep,
    sort: UserSorting,
) -> UsersResponse:
    users = await service.get_all_users(pagination, sort)
    return UsersResponse(users=[UserOut.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=UserResponse)
async def get_a_user_by_id(user_id: ObjectId, service: UserServiceDep, payload: UserOrAdmin) -> UserResponse:
    _ensure_owner(payload, user_id)
    user = await service.get_a_user_by_id(user_id)
    return UserResponse(user=UserOut.model_validate(user))


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, service: UserServiceDep) -> LoginResponse:
    result = await service.get_a_user_by_email(body.email, body.password)
    return LoginResponse(
        result=LoginResult(token=result["token"], user=UserOut.model_validate(result["user"]))
    )


@router.post("", response_model=UserResultResponse, status_code=status.HTTP_201_CREATED)
async def add_a_user(body: UserCreate, service: UserServiceDep, caller: CurrentUserOptional) -> UserResultResponse:
    """Open registration. Creating an ADMIN account requires an ADMIN token."""
    if body.role == Role.ADMIN and not (caller and is_allowed([Role.ADMIN], caller.get("role"))):
        raise ForbiddenException("Only administrators can create administrator accounts")
    result = await service.add_a_user(body)
    return UserResultResponse(result=UserOut.model_validate(result))


@router.put("/address/{user_id}", response_model=UserResultResponse)
async def add_an_user_address(
    user_id: ObjectId,
    body: Address,
    service: UserServiceDep,
    payload: UserOnly,
) -> UserResultResponse:
    _ensure_owner(payload, user_id)
    result = await service.add_an_user_address(user_id, body)
    return UserResultResponse(result=UserOut.model_validate(result))


@router.put("/{user_id}", response_model=ModifiedUserResponse)
async def modify_a_user_by_id(
    user_id: ObjectId,
    body: UserUpdate,
    service: UserServiceDep,
    payload: UserOnly,
) -> ModifiedUserResponse:
    _ensure_owner(payload, user_id)
    modified_user = await service.modify_a_user_by_id(user_id, body)
    return ModifiedUserResponse(modified_user=UserOut.model_validate(modified_user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_a_user_by_id(user_id: ObjectId, service: UserServiceDep, payload: UserOrAdmin) -> Response:
    _ensure_owner(payload, user_id)
    await service.delete_a_user_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
