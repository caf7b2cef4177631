"""Product Routes: /api/products CRUD endpoints.

Invariants:
    - Every route with an id or a body declares its rule chain via enforce_rules()
    - The rule-chain dependency is declared before get_db: invalid requests never
      open a database session
    - Success bodies are wrapped as {"data": ...}

Design Decisions:
    - id is declared as str: integer parsing is a rule ("El id debe ser numerico"),
      not a framework 422
    - Request bodies are documented through openapi_extra since the chains,
      not Pydantic, decide what is accepted
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.api.request_rules import enforce_rules
from products_api.core.product_rules import (
    CREATE_PRODUCT_RULES, DELETE_PRODUCT_RULES, GET_PRODUCT_RULES,
    TOGGLE_AVAILABILITY_RULES, UPDATE_PRODUCT_RULES,
)
from products_api.infrastructure.database import get_db
from products_api.schemas.product import (
    ErrorBody, MessageEnvelope, ProductCreateBody, ProductEnvelope,
    ProductListEnvelope, ProductResponse, ProductUpdateBody,
    ValidationErrorBody,
)
from products_api.services import products as handlers

router = APIRouter(prefix="/api/products", tags=["Products"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorBody}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorBody}}


def _json_body(schema: type) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema.model_json_schema()},
            },
        },
    }


def _envelope(product) -> ProductEnvelope:
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.get("", response_model=ProductListEnvelope, summary="Get a list of products")
async def get_products(db: AsyncSession = Depends(get_db)):
    products = await handlers.list_products(db)
    return ProductListEnvelope(
        data=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{id}", response_model=ProductEnvelope,
    summary="Get a product by id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def get_product_by_id(
    id: str = Path(description="The ID of the product"),
    _: dict[str, Any] = Depends(enforce_rules(GET_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Return a product based on its unique id."""
    return _envelope(await handlers.get_product_or_404(db, int(id)))


@router.post(
    "", response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    responses=_BAD_REQUEST,
    openapi_extra=_json_body(ProductCreateBody),
)
async def create_product(
    payload: dict[str, Any] = Depends(enforce_rules(CREATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    return _envelope(await handlers.create_product(db, payload))


@router.put(
    "/{id}", response_model=ProductEnvelope,
    summary="Update a product by id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    openapi_extra=_json_body(ProductUpdateBody),
)
async def update_product(
    id: str = Path(description="The ID of the product"),
    payload: dict[str, Any] = Depends(enforce_rules(UPDATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Replace name, price and availability."""
    return _envelope(await handlers.update_product(db, int(id), payload))


@router.patch(
    "/{id}", response_model=ProductEnvelope,
    summary="Update a product availability",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_availability(
    id: str = Path(description="The ID of the product"),
    _: dict[str, Any] = Depends(enforce_rules(TOGGLE_AVAILABILITY_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Flip availability. The request body, if any, is ignored."""
    return _envelope(await handlers.toggle_availability(db, int(id)))


@router.delete(
    "/{id}", response_model=MessageEnvelope,
    summary="Delete a product by a given id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_product(
    id: str = Path(description="The ID of the product"),
    _: dict[str, Any] = Depends(enforce_rules(DELETE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    return MessageEnvelope(data=await handlers.delete_product(db, int(id)))
