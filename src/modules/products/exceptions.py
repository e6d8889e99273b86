"""Product domain exceptions.

Raised by the Service Layer.  The API layer (views) catches them and
translates them into envelope responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, product_id: int | str) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")
