from typing import Any, List
import logging

from product_api.domain.exceptions import NotFound, OperationFailed
from product_api.domain.product import Product
from product_api.domain.repository import ProductRepository

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for an argument the caller did not pass."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class ProductService:
    """
    Application service for Product CRUD operations.

    This service handles:
    - Creating new products (validated before they reach the repository)
    - Looking products up, failing with NotFound on a miss
    - Merging partial updates into the stored product
    - Deleting products after confirming they exist

    Errors raised by the entity or the repository propagate unchanged.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def create_product(
        self,
        name: str,
        description: str,
        price: float,
        stock: int,
    ) -> Product:
        """
        Create a new product.

        Args:
            name: Product name
            description: Product description (may be empty)
            price: Non-negative price
            stock: Non-negative whole stock quantity

        Returns:
            The stored product, with id and timestamps assigned

        Raises:
            ValidationError: If any field is invalid; nothing is persisted
        """
        product = Product.create(name, description, price, stock)
        product.validate()

        created = self.repository.create(product)
        logger.info(f"Product #{created.id} '{created.name}' created")
        return created

    def get_product_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFound: If no product has this ID
        """
        product = self.repository.find_by_id(product_id)

        if product is None:
            raise NotFound(f"Product with ID {product_id} not found")

        return product

    def get_all_products(self) -> List[Product]:
        """Get every product, newest first."""
        return self.repository.find_all()

    def update_product(
        self,
        product_id: int,
        name: str = UNSET,
        description: str = UNSET,
        price: float = UNSET,
        stock: int = UNSET,
    ) -> Product:
        """
        Apply a partial update to an existing product.

        Only arguments that were actually passed overwrite the stored
        values; ``0``, ``""`` and ``None`` count as passed. The merged
        product is validated and handed to the repository as a whole.

        Raises:
            NotFound: If no product has this ID (checked before any change)
            ValidationError: If the merged product is invalid
        """
        product = self.get_product_by_id(product_id)

        changes = {
            "name": name,
            "description": description,
            "price": price,
            "stock": stock,
        }
        for field, value in changes.items():
            if value is not UNSET:
                setattr(product, field, value)

        product.validate()

        updated = self.repository.update(product)
        logger.info(f"Product #{product_id} updated")
        return updated

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            NotFound: If no product has this ID
            OperationFailed: If the repository removed nothing
        """
        self.get_product_by_id(product_id)

        deleted = self.repository.delete(product_id)

        if not deleted:
            raise OperationFailed(f"Failed to delete product with ID {product_id}")

        logger.info(f"Product #{product_id} deleted")
