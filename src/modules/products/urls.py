"""Product URL configuration.

Routes are served without a trailing slash: ``/api/products`` and
``/api/products/{id}``.
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
