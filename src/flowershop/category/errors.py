"""Failures reported by the category handlers."""

from dataclasses import dataclass

from flowershop.shared.results import DomainError, ErrorKind


@dataclass(frozen=True)
class CategoryError(DomainError):
    category_id: str


@dataclass(frozen=True)
class CategoryAlreadyExists(CategoryError):
    name: str

    kind = ErrorKind.CONFLICT

    @property
    def message(self):
        return f"Category already exists under name '{self.name}'"


@dataclass(frozen=True)
class CategoryNotFound(CategoryError):
    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Category not found under id {self.category_id}"


@dataclass(frozen=True)
class CategoryInUse(CategoryError):
    flower_count: int

    kind = ErrorKind.CONFLICT

    @property
    def message(self):
        return f"Category {self.category_id} is still assigned to {self.flower_count} flower(s)"


@dataclass(frozen=True)
class CategoryUnhandled(CategoryError):
    cause: Exception | None = None

    kind = ErrorKind.UNEXPECTED

    @property
    def message(self):
        return "Unexpected error occurred"


def category_unhandled(category_id):
    def build(exc):
        return CategoryUnhandled(category_id=category_id, cause=exc)

    return build
