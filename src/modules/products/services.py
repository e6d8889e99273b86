"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the injected
``IProductRepository``.  Payload validation happens in the DTOs before the
service is called.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import models, transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductInputDTO) -> Product:
        """Create a new product; the id is assigned on save."""
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            quantity=dto.quantity,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int | str, dto: ProductInputDTO) -> Product:
        """Replace every editable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.quantity = dto.quantity

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def patch_product(self, id: int | str, dto: UpdateProductDTO) -> Product:
        """Update only the fields supplied in ``dto``.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        changes = dto.changes()
        log = logger.bind(product_id=product.id, fields=sorted(changes))

        if not changes:
            log.info("product.patch_noop")
            return product

        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        log.info("product.patched")
        return product

    @transaction.atomic
    def delete_product(self, id: int | str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            logger.warning("product.delete_missing", product_id=str(id))
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Product]:
        """Return every product, optionally narrowed by ORM look-ups."""
        return self._repo.list(filters)

    def find_product(self, id: int | str) -> Optional[Product]:
        """Return the product with ``id`` or ``None`` when absent."""
        return self._repo.get_by_id(id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int | str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(id)
        return product
