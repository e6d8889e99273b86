"""Django ORM implementation of the Product repository.

Missing entities are reported with ``None`` / ``False`` rather than
exceptions; the Service Layer decides how to translate them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Product.objects.filter(pk=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"quantity__gt": 0}
            {"name__icontains": "widget"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if none matched.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        return True
