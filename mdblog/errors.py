"""Error taxonomy and the tagged result returned by post store operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class BlogError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    kind = "validation_error"
    status_code = 400


class ConflictError(BlogError):
    kind = "conflict"
    status_code = 409


class NotFoundError(BlogError):
    kind = "not_found"
    status_code = 404


class StorageIOError(BlogError):
    """Unexpected filesystem failure while reading or writing a post."""

    kind = "io_error"
    status_code = 500


class AuthError(BlogError):
    kind = "auth_error"
    status_code = 401


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: BlogError

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]
