"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer (views) and the Service layer and are
immutable (``frozen=True``).  Keys that are not declared, such as a
client-supplied ``id``, are ignored.

- ``ProductInputDTO``: full payload for creation and replacement (PUT).
- ``UpdateProductDTO``: partial payload (PATCH).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, field_validator

NAME_MAX_LENGTH = 255
PRICE_MAX = Decimal("99999999.99")
QUANTITY_MAX = 2_147_483_647
_CENT = Decimal("0.01")


def _check_price(v: Decimal) -> Decimal:
    if v < 0:
        raise ValueError("Price cannot be negative.")
    if v > PRICE_MAX:
        raise ValueError(f"Price cannot exceed {PRICE_MAX}.")
    try:
        quantized = v.quantize(_CENT)
    except InvalidOperation:
        raise ValueError("Price is not a valid amount.") from None
    if quantized != v:
        raise ValueError("Price must have at most two decimal places.")
    return quantized


def _reject_bool(v):
    if isinstance(v, bool):
        raise ValueError("Quantity must be an integer, not a boolean.")
    return v


def _check_quantity(v: int) -> int:
    if v < 0:
        raise ValueError("Quantity cannot be negative.")
    if v > QUANTITY_MAX:
        raise ValueError(f"Quantity cannot exceed {QUANTITY_MAX}.")
    return v


def _check_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be blank.")
    v = v.strip()
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Name cannot exceed {NAME_MAX_LENGTH} characters.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for a complete product payload.

    Validates:
    - ``name`` is present and not blank.
    - ``price`` is present, non-negative, with at most two decimal places.
    - ``quantity`` is an integer between 0 and ``QUANTITY_MAX``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    description: str = ""
    quantity: int = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_valid(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("description", mode="before")
    @classmethod
    def description_null_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_boolean(cls, v):
        return _reject_bool(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_in_range(cls, v: int) -> int:
        return _check_quantity(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for partial product updates.

    All fields are optional; only the fields present in the payload are
    applied (see ``changes()``).  ``name``, ``price`` and ``quantity`` may be
    omitted but not set to ``null``.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    price: Decimal | None = None
    description: str | None = None
    quantity: int | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Name must not be null.")
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_valid(cls, v: Decimal | None) -> Decimal:
        if v is None:
            raise ValueError("Price must not be null.")
        return _check_price(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_boolean(cls, v):
        return _reject_bool(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_in_range(cls, v: int | None) -> int:
        if v is None:
            raise ValueError("Quantity must not be null.")
        return _check_quantity(v)

    def changes(self) -> dict:
        """Fields explicitly supplied by the client."""
        data = self.model_dump(exclude_unset=True)
        if "description" in data and data["description"] is None:
            data["description"] = ""
        return data
