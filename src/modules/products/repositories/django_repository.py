"""Django ORM implementation of the Product repository.

Look-ups follow the Null Object pattern: a missing row comes back as
``None`` and the Service Layer decides what that means for the API.
Database errors are not caught here.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent IDs and for IDs outside the
        column's integer range.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, OverflowError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("-id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove the row for ``id``.

        Returns ``False`` when no product exists with the given ID.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        if not deleted:
            return False
        logger.info("product.row_deleted", product_id=id)
        return True
