"""
API v1 routes.

Defines REST endpoints for the Barista pre-order API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import (
    get_catalogue_service,
    get_code_issuer,
    get_code_redeemer,
    get_order_repository,
)
from src.api.models import (
    ErrorResponse,
    IssueCodeRequest,
    IssueCodeResponse,
    LoginRequest,
    LoginResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
)
from src.config.settings import Settings, get_settings
from src.domain.catalogue import CatalogueService
from src.domain.exceptions import DeliveryError, InvalidCodeError, ValidationError
from src.domain.ports import IssueResult, OrderRepository
from src.domain.verification import CodeIssuer, CodeRedeemer, normalize_email

router = APIRouter(tags=["v1"])

INVALID_CODE_DETAIL = "Invalid verification code"


@router.post(
    "/verification-codes",
    response_model=IssueCodeResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        422: {"description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Code stored but not delivered"},
    },
    summary="Send a verification code",
    description="Submit name and email to receive a 6-digit verification code. "
    "Any previous code for the same email stops working.",
)
async def issue_verification_code(
    request_data: IssueCodeRequest,
    issuer: CodeIssuer = Depends(get_code_issuer),
    settings: Settings = Depends(get_settings),
) -> IssueCodeResponse:
    """
    Issue a verification code and send it by email.

    - **name**: Customer name used in the email greeting
    - **email**: Address the code is sent to
    """
    try:
        result = await issuer.issue(request_data.name, request_data.email)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from None
    except DeliveryError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to send verification code",
        ) from None

    delivered = result == IssueResult.SENT
    return IssueCodeResponse(
        message="Verification code sent" if delivered else "Verification code could not be delivered",
        email=normalize_email(request_data.email),
        expires_in_seconds=settings.code_ttl_seconds,
        delivered=delivered,
    )


@router.post(
    "/orders",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid verification code"},
        422: {"description": "Validation error"},
    },
    summary="Place an order",
    description="Confirm the cart with the 6-digit code received by email. "
    "Each code can be used once.",
)
async def place_order(
    request_data: PlaceOrderRequest,
    redeemer: CodeRedeemer = Depends(get_code_redeemer),
) -> OrderResponse:
    """
    Redeem a verification code and confirm the order.

    - **code**: 6-digit verification code from email
    - **cart**: Quantity per product id
    - **total**: Cart total, greater than zero
    """
    try:
        order = redeemer.redeem(
            request_data.name,
            request_data.email,
            request_data.code,
            request_data.cart,
            request_data.total,
        )
    except InvalidCodeError:
        # Never issued, wrong, used and expired all look the same
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CODE_DETAIL,
        ) from None
    return OrderResponse.model_validate(order)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid verification code"},
        422: {"description": "Validation error"},
    },
    summary="Log in with a verification code",
    description="Confirm control of the email address without placing an order.",
)
async def login(
    request_data: LoginRequest,
    redeemer: CodeRedeemer = Depends(get_code_redeemer),
) -> LoginResponse:
    try:
        redeemer.redeem(request_data.name, request_data.email, request_data.code, {}, 0)
    except InvalidCodeError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CODE_DETAIL,
        ) from None
    return LoginResponse(
        message="Login confirmed",
        name=request_data.name,
        email=normalize_email(request_data.email),
    )


@router.get(
    "/orders",
    response_model=list[OrderResponse],
    summary="List confirmed orders",
    description="Barista view: confirmed orders, most recent first.",
)
async def list_orders(
    orders: OrderRepository = Depends(get_order_repository),
) -> list[OrderResponse]:
    return [OrderResponse.model_validate(order) for order in orders.list_orders()]


@router.get(
    "/products",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    catalogue: CatalogueService = Depends(get_catalogue_service),
) -> list[ProductResponse]:
    """List the menu. Products without a photo get a generated image."""
    products = await catalogue.list_products()
    return [ProductResponse.model_validate(product) for product in products]
