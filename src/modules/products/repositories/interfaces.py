"""Product repository interface.

Extends ``IRepository[Product]``; the service only ever talks to this
contract, so any data-access layer with the same shape is interchangeable.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self) -> List["Product"]:
        """List products, newest first."""
