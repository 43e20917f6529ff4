"""
Typed HTTP exceptions raised by services and repositories.
Mapped to JSON responses by the handler registered in main.create_app.
"""

from fastapi import status


class HttpException(Exception):
    """Base for errors that carry their own HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(
        self,
        status_code: int | None = None,
        message: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.headers = headers
        super().__init__(message)


class IdNotFoundException(HttpException):
    """No record exists under the requested id."""

    code = "id_not_found"

    def __init__(self, message: str = "") -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, message)


class UnauthorizedException(HttpException):
    """Missing, invalid or rejected credentials. Carries the Bearer challenge header."""

    code = "unauthorized"

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenException(HttpException):
    code = "forbidden"

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(status.HTTP_403_FORBIDDEN, message)


class ConflictException(HttpException):
    code = "conflict"

    def __init__(self, message: str = "") -> None:
        super().__init__(status.HTTP_409_CONFLICT, message)
