"""Flower removal: command and handler.

Stored image files are left in place; only the flower, its image records and
its category links are deleted.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from flowershop.domain import flowershop
from flowershop.flower.errors import FlowerNotFound
from flowershop.flower.flower import Flower
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Flower")
class DeleteFlower:
    flower_id: Identifier(required=True)


@flowershop.command_handler(part_of=Flower)
class DeleteFlowerHandler:
    @handle(DeleteFlower)
    def delete_flower(self, command):
        repo = current_domain.repository_for(Flower)

        flower = repo.get_by_id(command.flower_id)
        if flower is None:
            return Failure(FlowerNotFound(flower_id=command.flower_id))

        repo.remove(flower)

        logger.info("flower_deleted", flower_id=flower.id)
        return Success(flower)
