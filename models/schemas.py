"""
Pydantic schemas shared across resources.
Error payloads, pagination and the camelCase base used on the wire.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(BaseModel):
    """Standard error payload for API responses."""

    detail: str
    code: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"extra": "forbid"}


class Pagination(BaseModel):
    """Result window for list endpoints. page is 0-based."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=5, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size
