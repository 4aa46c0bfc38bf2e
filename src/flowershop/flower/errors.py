"""Failures reported by the flower handlers."""

from dataclasses import dataclass

from flowershop.shared.results import DomainError, ErrorKind


@dataclass(frozen=True)
class FlowerError(DomainError):
    flower_id: str


@dataclass(frozen=True)
class FlowerAlreadyExists(FlowerError):
    kind = ErrorKind.CONFLICT

    @property
    def message(self):
        return f"Flower already exists under id {self.flower_id}"


@dataclass(frozen=True)
class FlowerNotFound(FlowerError):
    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Flower not found under id {self.flower_id}"


@dataclass(frozen=True)
class FlowerCategoriesNotFound(FlowerError):
    """One or more requested categories do not exist.

    ``flower_id`` is the id of the flower being created or updated, which may
    not have been persisted yet.
    """

    missing_category_ids: tuple[str, ...] = ()

    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"One or more categories not found for flower {self.flower_id}"


@dataclass(frozen=True)
class FlowerImageNotFound(FlowerError):
    image_id: str

    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Image {self.image_id} not found for flower {self.flower_id}"


@dataclass(frozen=True)
class FlowerImagesMissing(FlowerError):
    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return f"No files were uploaded for flower {self.flower_id}"


@dataclass(frozen=True)
class FlowerUnhandled(FlowerError):
    cause: Exception | None = None

    kind = ErrorKind.UNEXPECTED

    @property
    def message(self):
        return "Unexpected error occurred"


def flower_unhandled(flower_id):
    def build(exc):
        return FlowerUnhandled(flower_id=flower_id, cause=exc)

    return build
