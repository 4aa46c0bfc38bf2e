"""FastAPI endpoints for the Catalogue."""

import json

from fastapi import APIRouter, File, UploadFile
from protean.utils.globals import current_domain

from flowershop.api.catalogue_schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateFlowerRequest,
    FlowerResponse,
    UpdateCategoryRequest,
    UpdateFlowerRequest,
)
from flowershop.category.category import Category
from flowershop.category.errors import CategoryNotFound, category_unhandled
from flowershop.category.management import CreateCategory, DeleteCategory, UpdateCategory
from flowershop.flower.creation import CreateFlower
from flowershop.flower.details import UpdateFlower
from flowershop.flower.errors import FlowerNotFound, flower_unhandled
from flowershop.flower.flower import Flower
from flowershop.flower.images import FlowerImagesHandler, UploadedFile
from flowershop.flower.removal import DeleteFlower
from flowershop.shared.http import unwrap
from flowershop.shared.identifiers import parse_identifier
from flowershop.shared.processing import dispatch
from flowershop.shared.results import Failure, Success
from flowershop.shared.storage import file_storage

flower_router = APIRouter(prefix="/flowers", tags=["flowers"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def _category_ids(ids):
    return json.dumps([parse_identifier(category_id, "category_ids") for category_id in ids])


# --- Flower endpoints ---


@flower_router.get("", response_model=list[FlowerResponse])
async def list_flowers() -> list[FlowerResponse]:
    flowers = current_domain.repository_for(Flower).list_all()
    return [FlowerResponse.from_flower(flower) for flower in flowers]


@flower_router.get("/category/{category_id}", response_model=list[FlowerResponse])
async def list_flowers_by_category(category_id: str) -> list[FlowerResponse]:
    flowers = current_domain.repository_for(Flower).by_category(parse_identifier(category_id, "category_id"))
    return [FlowerResponse.from_flower(flower) for flower in flowers]


@flower_router.get("/{flower_id}", response_model=FlowerResponse)
async def get_flower(flower_id: str) -> FlowerResponse:
    flower_id = parse_identifier(flower_id, "flower_id")
    flower = current_domain.repository_for(Flower).get_by_id(flower_id)
    result = Success(flower) if flower is not None else Failure(FlowerNotFound(flower_id=flower_id))
    return FlowerResponse.from_flower(unwrap(result))


@flower_router.post("", status_code=201, response_model=FlowerResponse)
async def create_flower(body: CreateFlowerRequest) -> FlowerResponse:
    command = CreateFlower(
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category_ids=_category_ids(body.category_ids),
    )
    result = dispatch(command, on_unexpected=flower_unhandled(None))
    return FlowerResponse.from_flower(unwrap(result))


@flower_router.put("", response_model=FlowerResponse)
async def update_flower(body: UpdateFlowerRequest) -> FlowerResponse:
    flower_id = parse_identifier(body.id, "id")
    command = UpdateFlower(
        flower_id=flower_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category_ids=_category_ids(body.category_ids),
    )
    result = dispatch(command, on_unexpected=flower_unhandled(flower_id))
    return FlowerResponse.from_flower(unwrap(result))


@flower_router.delete("/{flower_id}", response_model=FlowerResponse)
async def delete_flower(flower_id: str) -> FlowerResponse:
    flower_id = parse_identifier(flower_id, "flower_id")
    result = dispatch(DeleteFlower(flower_id=flower_id), on_unexpected=flower_unhandled(flower_id))
    return FlowerResponse.from_flower(unwrap(result))


@flower_router.post("/{flower_id}/images", response_model=FlowerResponse)
async def upload_flower_images(
    flower_id: str,
    files: list[UploadFile] | None = File(None, description="Image files to attach"),  # noqa: B008
) -> FlowerResponse:
    flower_id = parse_identifier(flower_id, "flower_id")
    uploads = [UploadedFile(filename=file.filename or "", content=await file.read()) for file in files or []]

    handler = FlowerImagesHandler(file_storage(), current_domain.repository_for(Flower))
    return FlowerResponse.from_flower(unwrap(handler.upload(flower_id, uploads)))


@flower_router.delete("/{flower_id}/images/{image_id}", response_model=FlowerResponse)
async def delete_flower_image(flower_id: str, image_id: str) -> FlowerResponse:
    flower_id = parse_identifier(flower_id, "flower_id")
    image_id = parse_identifier(image_id, "image_id")

    handler = FlowerImagesHandler(file_storage(), current_domain.repository_for(Flower))
    return FlowerResponse.from_flower(unwrap(handler.delete(flower_id, image_id)))


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    return [CategoryResponse.from_category(category) for category in categories]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    category_id = parse_identifier(category_id, "category_id")
    category = current_domain.repository_for(Category).get_by_id(category_id)
    result = Success(category) if category is not None else Failure(CategoryNotFound(category_id=category_id))
    return CategoryResponse.from_category(unwrap(result))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    result = dispatch(CreateCategory(name=body.name), on_unexpected=category_unhandled(None))
    return CategoryResponse.from_category(unwrap(result))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> CategoryResponse:
    category_id = parse_identifier(category_id, "category_id")
    command = UpdateCategory(category_id=category_id, name=body.name)
    result = dispatch(command, on_unexpected=category_unhandled(category_id))
    return CategoryResponse.from_category(unwrap(result))


@category_router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(category_id: str) -> CategoryResponse:
    category_id = parse_identifier(category_id, "category_id")
    result = dispatch(DeleteCategory(category_id=category_id), on_unexpected=category_unhandled(category_id))
    return CategoryResponse.from_category(unwrap(result))
