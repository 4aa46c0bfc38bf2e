"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# At least one non-whitespace character
NON_BLANK = r"^\s*\S"

# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Roses"}]}}

    name: str = Field(..., min_length=1, max_length=100, pattern=NON_BLANK)


class UpdateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Garden Roses"}]}}

    name: str = Field(..., min_length=1, max_length=100, pattern=NON_BLANK)


class CategoryResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "c3d4e5f6-a7b8-4012-8def-123456789012",
                    "name": "Roses",
                    "created_at": "2025-11-15T19:05:31Z",
                    "updated_at": None,
                }
            ]
        }
    }

    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


# --- Flower Schemas ---


class CreateFlowerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Red Rose",
                    "description": "Long-stemmed red rose.",
                    "price": 19.99,
                    "stock_quantity": 100,
                    "category_ids": ["c3d4e5f6-a7b8-4012-8def-123456789012"],
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255, pattern=NON_BLANK)
    description: str = Field(..., min_length=1, max_length=1000, pattern=NON_BLANK)
    price: float = Field(..., gt=0)
    stock_quantity: int = Field(..., ge=0)
    category_ids: list[str] = Field(..., min_length=1)


class UpdateFlowerRequest(CreateFlowerRequest):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "b2c3d4e5-f6a7-4901-bcde-f12345678901",
                    "name": "Red Rose",
                    "description": "Long-stemmed red rose, now in season.",
                    "price": 17.5,
                    "stock_quantity": 250,
                    "category_ids": ["c3d4e5f6-a7b8-4012-8def-123456789012"],
                }
            ]
        }
    }

    id: str


class FlowerImageResponse(BaseModel):
    id: str
    original_name: str
    path: str


class FlowerResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    stock_quantity: int
    category_ids: list[str] = []
    images: list[FlowerImageResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_flower(cls, flower) -> FlowerResponse:
        return cls(
            id=str(flower.id),
            name=flower.name,
            description=flower.description,
            price=flower.price,
            stock_quantity=flower.stock_quantity,
            category_ids=[str(category_id) for category_id in flower.category_ids],
            images=[
                FlowerImageResponse(
                    id=str(image.id),
                    original_name=image.original_name,
                    path=flower.image_path(image),
                )
                for image in flower.images
            ],
            created_at=flower.created_at,
            updated_at=flower.updated_at,
        )
