"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every action
that takes input is gated by its rule set from ``rules.py``; the actions
themselves only ever see clean input.  ``ProductNotFound`` is translated to
404 here; database errors propagate to the project exception handler.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiExample,
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import BODY, validate_request
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.rules import CREATE_RULES, ID_RULES, UPDATE_RULES
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted"

_ERRORS_RESPONSE = OpenApiResponse(
    response=inline_serializer(
        name="ValidationErrors",
        fields={
            "errors": serializers.ListField(
                child=inline_serializer(
                    name="FieldError",
                    fields={
                        "field": serializers.CharField(),
                        "message": serializers.CharField(),
                        "location": serializers.CharField(),
                    },
                )
            )
        },
    ),
    description="Bad Request - invalid ID or invalid input data",
)
_NOT_FOUND_RESPONSE = OpenApiResponse(
    response=inline_serializer(
        name="ProductNotFound", fields={"error": serializers.CharField()}
    ),
    description="Product not found",
)
_PRODUCT_RESPONSE = inline_serializer(
    name="ProductEnvelope", fields={"data": ProductSerializer()}
)
_PRODUCT_LIST_RESPONSE = inline_serializer(
    name="ProductListEnvelope", fields={"data": ProductSerializer(many=True)}
)
_PRODUCT_INPUT = inline_serializer(
    name="ProductInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
        "availability": serializers.BooleanField(required=False),
    },
)
_ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product",
)


def _dto_fields(data: Any, names: tuple) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        return {}
    return {name: data[name] for name in names if name in data}


def _dto_errors(exc: PydanticValidationError) -> Response:
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "location": BODY,
        }
        for error in exc.errors()
    ]
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        description="Return every product, newest first.",
        responses={200: _PRODUCT_LIST_RESPONSE},
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        description="Return a product based on its unique ID.",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_RESPONSE, 400: _ERRORS_RESPONSE, 404: _NOT_FOUND_RESPONSE},
    ),
    create=extend_schema(
        summary="Create a new product",
        description="Store a new product and return it.",
        request=_PRODUCT_INPUT,
        responses={201: _PRODUCT_RESPONSE, 400: _ERRORS_RESPONSE},
        examples=[
            OpenApiExample(
                "Curved monitor",
                value={"name": "Curved monitor 49 inches", "price": 399},
                request_only=True,
            )
        ],
    ),
    update=extend_schema(
        summary="Update a product",
        description="Overwrite name, price and availability; returns the updated product.",
        parameters=[_ID_PARAMETER],
        request=_PRODUCT_INPUT,
        responses={200: _PRODUCT_RESPONSE, 400: _ERRORS_RESPONSE, 404: _NOT_FOUND_RESPONSE},
    ),
    partial_update=extend_schema(
        summary="Toggle product availability",
        description="Flip the availability flag; returns the updated product.",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: _PRODUCT_RESPONSE, 400: _ERRORS_RESPONSE, 404: _NOT_FOUND_RESPONSE},
    ),
    destroy=extend_schema(
        summary="Delete a product",
        description="Remove a product permanently.",
        parameters=[_ID_PARAMETER],
        responses={
            200: inline_serializer(
                name="ProductDeleted", fields={"data": serializers.CharField()}
            ),
            400: _ERRORS_RESPONSE,
            404: _NOT_FOUND_RESPONSE,
        },
    ),
)
class ProductViewSet(GenericViewSet):
    """ViewSet for the product routes.

    Does **not** extend ``ModelViewSet``: all ORM access goes through
    ``ProductService`` and ``ProductDjangoRepository``.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    lookup_url_kwarg = "id"
    # Any path segment reaches the action so ID_RULES can reject it with 400.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @validate_request(*ID_RULES)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @validate_request(*CREATE_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO(
                **_dto_fields(request.data, ("name", "price", "availability"))
            )
        except PydanticValidationError as exc:
            return _dto_errors(exc)

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate_request(*UPDATE_RULES)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        try:
            dto = UpdateProductDTO(
                **_dto_fields(request.data, ("name", "price", "availability"))
            )
        except PydanticValidationError as exc:
            return _dto_errors(exc)

        try:
            product = self._service.update_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(*ID_RULES)
    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}"""
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(*ID_RULES)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
