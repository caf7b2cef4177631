"""Product Schemas: response envelopes and documented request bodies.

Invariants:
    - ProductResponse never carries persistence timestamps
    - Every success body is wrapped as {"data": ...}
    - Error bodies are {"errors": [...]} (400) or {"error": "..."} (404/5xx)

Design Decisions:
    - ProductCreateBody/ProductUpdateBody are documentation only: FastAPI would
      stop at the first type error per field, the rule chains report all of them
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    """Public product representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(examples=[1])
    name: str = Field(examples=["Monitor Curvo Samsung"])
    price: float = Field(examples=[300])
    availability: bool = Field(examples=[True])


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["Producto Eliminado"])


class ProductCreateBody(BaseModel):
    name: str = Field(examples=["Monitor Curvo Samsung 49 pulgadas"])
    price: float = Field(gt=0, examples=[300])


class ProductUpdateBody(ProductCreateBody):
    availability: bool = Field(examples=[True])


class FieldErrorEntry(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorBody(BaseModel):
    errors: list[FieldErrorEntry]


class ErrorBody(BaseModel):
    error: str = Field(examples=["No existe el producto"])
