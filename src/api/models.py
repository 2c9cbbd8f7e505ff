"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.models import OrderStatus


class IssueCodeRequest(BaseModel):
    """Request model for issuing a verification code."""

    name: str = Field(..., min_length=1, max_length=100, description="Customer name")
    email: EmailStr


class IssueCodeResponse(BaseModel):
    """Response model for an issued verification code."""

    message: str
    email: str
    expires_in_seconds: int
    delivered: bool


class PlaceOrderRequest(BaseModel):
    """Request model for confirming a cart with a verification code."""

    name: str = Field(..., min_length=1, max_length=100, description="Customer name")
    email: EmailStr
    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^\d{6}$",
        description="6-digit verification code",
    )
    cart: dict[str, int] = Field(
        default_factory=dict, description="Requested quantity per product id"
    )
    total: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class LoginRequest(BaseModel):
    """Request model for confirming a login with a verification code."""

    name: str = Field(..., min_length=1, max_length=100, description="Customer name")
    email: EmailStr
    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^\d{6}$",
        description="6-digit verification code",
    )


class LoginResponse(BaseModel):
    """Response model for a confirmed login."""

    message: str
    name: str
    email: str


class OrderResponse(BaseModel):
    """A confirmed order."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_name: str
    total: Decimal
    status: OrderStatus


class SizeOptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    size: str
    price: Decimal


class ProductResponse(BaseModel):
    """A catalogue entry with its image resolved."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    sizes: list[SizeOptionResponse]
    image_url: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
