"""Tagged results returned by the flower shop handlers.

Handlers never raise for expected failures. They return either a
``Success`` wrapping the produced value or a ``Failure`` wrapping a typed
``DomainError``. Each error declares an ``ErrorKind`` which the HTTP layer
maps onto a status code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Broad failure categories shared by every error family."""

    CONFLICT = "Conflict"
    NOT_FOUND = "NotFound"
    VALIDATION = "Validation"
    UNEXPECTED = "Unexpected"


@dataclass(frozen=True)
class DomainError:
    """Base for all typed handler errors.

    Subclasses are frozen dataclasses carrying the ids involved, and override
    ``kind`` and ``message``.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED

    @property
    def message(self) -> str:
        return "Unexpected error occurred"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    error: DomainError

    ok: ClassVar[bool] = False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Result = Success | Failure
