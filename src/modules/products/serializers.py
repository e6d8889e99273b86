"""Product DRF serializer for API output.

Input is validated by the pydantic DTOs in ``dtos.py``; this serializer
only shapes a ``Product`` into the ``data`` member of the envelope.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
