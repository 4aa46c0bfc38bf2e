"""Pydantic request/response schemas for the Customer API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

NON_BLANK = r"^\s*\S"


class CustomerDetailsRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Olena",
                    "last_name": "Kovalenko",
                    "email": "olena@example.com",
                    "phone": "+380501234567",
                    "address": "12 Khreshchatyk St, Kyiv",
                }
            ]
        }
    }

    first_name: str = Field(..., min_length=1, max_length=100, pattern=NON_BLANK)
    last_name: str = Field(..., min_length=1, max_length=100, pattern=NON_BLANK)
    email: str = Field(..., min_length=3, max_length=255, pattern=NON_BLANK)
    phone: str = Field(..., min_length=1, max_length=20, pattern=NON_BLANK)
    address: str = Field(..., min_length=1, max_length=500, pattern=NON_BLANK)


class CustomerResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_customer(cls, customer) -> CustomerResponse:
        return cls(
            id=str(customer.id),
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
