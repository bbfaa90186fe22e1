"""Unit tests for ProductSerializer."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from rest_framework.renderers import JSONRenderer

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        }

    def test_serializes_product(self):
        product = Product.objects.create(name="Widget", price=Decimal("19.90"))
        data = ProductSerializer(product).data
        assert data["id"] == product.id
        assert data["name"] == "Widget"
        assert data["availability"] is True

    def test_price_rendered_as_json_number(self):
        product = Product.objects.create(name="Widget", price=Decimal("19.90"))
        payload = json.loads(JSONRenderer().render(ProductSerializer(product).data))
        assert payload["price"] == 19.9
        assert isinstance(payload["price"], float)
