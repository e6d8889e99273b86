from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""
    from modules.products.models import Product

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "description": "A fine widget",
            "price": Decimal("19.99"),
            "quantity": 10,
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make
