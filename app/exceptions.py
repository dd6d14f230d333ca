from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int | None = None

    def __init__(self, message: str, status_code: int | None = None):
        self.message = str(message.value) if hasattr(message, "value") else str(message)
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class InvalidToken(Forbidden):
    pass


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExists(AppError):
    status_code = status.HTTP_409_CONFLICT


class ValidationFailed(AppError):
    status_code = 422
