"""
FastAPI dependency injection: settings, auth, role checks, services, list parameters.
Services live on app.state (built once in create_app) and are handed to routes here.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.authorization import Role, is_allowed
from core.config import SettingsDep
from core.exceptions import ForbiddenException, UnauthorizedException
from core.security import verify_token
from models.schemas import Pagination
from services.furniture_service import FurnitureService
from services.user_service import UserService
from utils.logging import get_logger
from utils.validators import OBJECT_ID_PATTERN, SortSpec, parse_sort

__all__ = [
    "CurrentUserOptional",
    "CurrentUserRequired",
    "FurnitureServiceDep",
    "ObjectId",
    "PaginationDep",
    "SettingsDep",
    "UserServiceDep",
    "require_roles",
    "sorting",
]

logger = get_logger(__name__)

security_scheme = HTTPBearer(auto_error=False)

ObjectId = Annotated[str, Path(pattern=OBJECT_ID_PATTERN, description="24-character hex id")]


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
) -> dict | None:
    """
    Optional JWT auth: returns payload if valid token present, else None.
    Use for routes that behave differently for authenticated users.
    """
    if not credentials:
        return None
    return verify_token(credentials.credentials)


async def get_current_user_required(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
) -> dict:
    """Required JWT auth: 401 if missing or invalid."""
    if not credentials:
        raise UnauthorizedException("Not authenticated")
    payload = verify_token(credentials.credentials)
    if not payload:
        raise UnauthorizedException("Invalid or expired token")
    return payload


CurrentUserOptional = Annotated[dict | None, Depends(get_current_user_optional)]
CurrentUserRequired = Annotated[dict, Depends(get_current_user_required)]


def require_roles(*admitted_roles: Role) -> Callable[..., dict]:
    """
    Dependency factory: authenticated caller whose role is in admitted_roles, else 403.
    Usage: payload: Annotated[dict, Depends(require_roles(Role.ADMIN))]
    """

    async def _role_dependency(payload: CurrentUserRequired) -> dict:
        if not is_allowed(admitted_roles, payload.get("role")):
            logger.warning(
                "role_denied",
                extra={
                    "sub": payload.get("sub"),
                    "role": payload.get("role"),
                    "admitted": [r.value for r in admitted_roles],
                },
            )
            raise ForbiddenException()
        return payload

    return _role_dependency


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_furniture_service(request: Request) -> FurnitureService:
    return request.app.state.furniture_service


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
FurnitureServiceDep = Annotated[FurnitureService, Depends(get_furniture_service)]


def get_pagination(
    settings: SettingsDep,
    page: int = Query(default=0, ge=0, description="0-based page number"),
    size: int | None = Query(default=None, ge=1, description="Page size"),
) -> Pagination:
    """Pagination from query params; size defaults to and is capped by settings."""
    size = size or settings.DEFAULT_PAGE_SIZE
    return Pagination(page=page, size=min(size, settings.MAX_PAGE_SIZE))


PaginationDep = Annotated[Pagination, Depends(get_pagination)]


def sorting(allowed: frozenset[str]) -> Callable[..., SortSpec]:
    """Dependency factory parsing sort_by ("+name", "-cost") against a resource's sortable fields."""

    def _sort_dependency(
        settings: SettingsDep,
        sort_by: str | None = Query(default=None, description="[+|-]field, e.g. +name"),
    ) -> SortSpec:
        try:
            return parse_sort(sort_by or settings.DEFAULT_SORT, allowed)
        except ValueError as e:
            raise RequestValidationError(
                [{"type": "value_error", "loc": ("query", "sort_by"), "msg": str(e), "input": sort_by}]
            ) from e

    return _sort_dependency
