"""User and address schemas: request bodies, stored shape and API responses."""

from pydantic import EmailStr, Field

from core.authorization import Role
from models.schemas import CamelModel


class Address(CamelModel):
    country: str = Field(..., min_length=1, description="The country is required")
    state: str = Field(..., min_length=1, description="The state is required")
    street: str = Field(..., min_length=1, description="The street is required")
    city: str = Field(..., min_length=1, description="The city is required")
    room_number: str | None = None


class UserCreate(CamelModel):
    """Registration body. Password is hashed by the service before storage."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8, description="8 characters minimum")
    phone: str | None = None
    role: Role = Role.USER
    address: list[Address] = Field(default_factory=list)


class UserUpdate(CamelModel):
    """Mutable user fields. Omitted fields are left unchanged."""

    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=8)
    phone: str | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(CamelModel):
    """User as returned by the API; never includes the password hash."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    role: Role
    address: list[Address] = Field(default_factory=list)


class LoginResult(CamelModel):
    token: str
    token_type: str = "bearer"
    user: UserOut


class UsersResponse(CamelModel):
    users: list[UserOut]


class UserResponse(CamelModel):
    user: UserOut


class UserResultResponse(CamelModel):
    result: UserOut


class LoginResponse(CamelModel):
    result: LoginResult


class ModifiedUserResponse(CamelModel):
    modified_user: UserOut
