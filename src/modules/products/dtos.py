"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  The request
body has already passed the route's validation rules when these are built;
the DTOs coerce the raw JSON values into the types the model stores
(``price`` -> ``Decimal``, ``availability`` -> ``bool``) and enforce the
column limits the rules do not cover.  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_NAME_LENGTH = 100
MAX_PRICE = Decimal("99999999.99")
_CENTS = Decimal("0.01")
_BOOLEAN_TEXT = frozenset({"true", "false", "1", "0"})


def _normalise_price(value: Decimal) -> Decimal:
    if not value.is_finite() or value <= 0:
        raise ValueError("Price must be greater than zero.")
    value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if value > MAX_PRICE:
        raise ValueError(f"Price must not exceed {MAX_PRICE}.")
    if value <= 0:
        raise ValueError("Price must be greater than zero.")
    return value


class CreateProductDTO(BaseModel):
    """Input for product creation; ``availability`` defaults to ``True``."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = Field(max_length=MAX_NAME_LENGTH)
    price: Decimal
    availability: bool = True

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)

    @field_validator("availability", mode="before")
    @classmethod
    def availability_must_be_boolean(cls, v: Any) -> Any:
        # Only true/false/1/0; pydantic alone would also take "yes", "on", ...
        if isinstance(v, bool) or str(v) in _BOOLEAN_TEXT:
            return v
        raise ValueError("Availability must be true, false, 1 or 0.")


class UpdateProductDTO(CreateProductDTO):
    """Input for a full update: every field is overwritten."""

    availability: bool
