"""Category management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from flowershop.category.category import Category
from flowershop.category.errors import (
    CategoryAlreadyExists,
    CategoryInUse,
    CategoryNotFound,
)
from flowershop.domain import flowershop
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)


@flowershop.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)


@flowershop.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@flowershop.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        existing = repo.get_by_name(command.name)
        if existing is not None:
            return Failure(CategoryAlreadyExists(category_id=existing.id, name=command.name))

        category = Category.create(name=command.name)
        repo.add(category)

        logger.info("category_created", category_id=category.id, name=category.name)
        return Success(category)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)

        category = repo.get_by_id(command.category_id)
        if category is None:
            return Failure(CategoryNotFound(category_id=command.category_id))

        existing = repo.get_by_name(command.name)
        if existing is not None and existing.id != category.id:
            return Failure(CategoryAlreadyExists(category_id=existing.id, name=command.name))

        category.rename(command.name)
        repo.add(category)
        return Success(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from flowershop.flower.flower import Flower

        repo = current_domain.repository_for(Category)

        category = repo.get_by_id(command.category_id)
        if category is None:
            return Failure(CategoryNotFound(category_id=command.category_id))

        flowers = current_domain.repository_for(Flower).by_category(category.id)
        if flowers:
            return Failure(CategoryInUse(category_id=category.id, flower_count=len(flowers)))

        repo.remove(category)

        logger.info("category_deleted", category_id=category.id)
        return Success(category)
