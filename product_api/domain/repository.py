"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLAlchemy, Redis-cached,
in-memory) live outside it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from product_api.domain.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Assign id and timestamps, persist, and return the stored product."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """Return every product, newest first."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Persist the full current state of an already stored product.

        Raises:
            InvalidArgument: If the product has no id
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Delete a product, returning whether a row was removed."""
