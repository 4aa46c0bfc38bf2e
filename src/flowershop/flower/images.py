"""Flower image upload and removal.

Image contents are raw bytes which never travel through serialized commands,
so this handler is invoked directly rather than through the command bus. It
receives its file store and flower repository through the constructor and
opens its own unit of work for every call.
"""

from dataclasses import dataclass

from protean import UnitOfWork
from protean.exceptions import ValidationError

from flowershop.flower.errors import (
    FlowerImageNotFound,
    FlowerImagesMissing,
    FlowerNotFound,
    FlowerUnhandled,
)
from flowershop.shared.results import Failure, Result, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    content: bytes


class FlowerImagesHandler:
    def __init__(self, storage, flowers):
        self.storage = storage
        self.flowers = flowers

    def upload(self, flower_id: str, files: list[UploadedFile]) -> Result:
        """Store every file and attach an image record per file to the flower.

        All-or-nothing: if anything fails, files already written by this call
        are deleted again and no image record is kept.
        """
        if not files:
            return Failure(FlowerImagesMissing(flower_id=flower_id))

        written = []
        try:
            with UnitOfWork():
                flower = self.flowers.get_by_id(flower_id)
                if flower is None:
                    return Failure(FlowerNotFound(flower_id=flower_id))

                for upload in files:
                    image = flower.add_image(original_name=upload.filename)
                    path = flower.image_path(image)
                    self.storage.upload(upload.content, path)
                    written.append(path)

                self.flowers.add(flower)
        except ValidationError:
            self._discard(written)
            raise
        except Exception as exc:
            self._discard(written)
            logger.exception("image_upload_failed", flower_id=flower_id, files=len(files))
            return Failure(FlowerUnhandled(flower_id=flower_id, cause=exc))

        logger.info("flower_images_uploaded", flower_id=flower_id, files=len(files))
        return Success(flower)

    def delete(self, flower_id: str, image_id: str) -> Result:
        """Delete the stored file first, then the image record."""
        try:
            with UnitOfWork():
                flower = self.flowers.get_by_id(flower_id)
                if flower is None:
                    return Failure(FlowerNotFound(flower_id=flower_id))

                image = flower.find_image(image_id)
                if image is None:
                    return Failure(FlowerImageNotFound(flower_id=flower_id, image_id=image_id))

                self.storage.delete(flower.image_path(image))
                flower.remove_image(image.id)
                self.flowers.add(flower)
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("image_delete_failed", flower_id=flower_id, image_id=image_id)
            return Failure(FlowerUnhandled(flower_id=flower_id, cause=exc))

        logger.info("flower_image_deleted", flower_id=flower_id, image_id=image_id)
        return Success(flower)

    def _discard(self, paths):
        """Best-effort removal of files written before a failed upload."""
        for path in paths:
            try:
                self.storage.delete(path)
            except Exception:
                logger.exception("image_cleanup_failed", path=path)
