"""Product API views.

Exposes ``ProductService`` over HTTP with a DRF ViewSet.  Every response is
wrapped in the ``{success, data|message}`` envelope.  Validation errors are
answered with 400 before the service runs, and ``ProductNotFound`` is
translated into 404.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import (
    error_response,
    format_validation_errors,
    message_response,
    success_response,
)
from modules.products.dtos import ProductInputDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_DELETED = "Product deleted successfully"


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    All ORM access goes through ``ProductService`` and
    ``ProductDjangoRepository``; ``queryset`` is declared for schema
    generation only.
    """

    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend]
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    # Dotted ids such as "1.5" must reach retrieve() instead of the format suffix route.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_queryset(self):
        return self._service.list_products()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self.filter_queryset(self.get_queryset())
        return success_response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.find_product(pk)
        if product is None:
            return error_response(PRODUCT_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return success_response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid_payload(exc)

        product = self._service.create_product(dto)
        return success_response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid_payload(exc)

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return success_response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}"""
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid_payload(exc)

        try:
            product = self._service.patch_product(pk, dto)
        except ProductNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return success_response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return message_response(PRODUCT_DELETED)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _invalid_payload(exc: PydanticValidationError) -> Response:
        return error_response(
            format_validation_errors(exc.errors()),
            status.HTTP_400_BAD_REQUEST,
        )
