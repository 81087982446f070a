from datetime import datetime
from typing import List, Optional

from product_api.domain.product import Product
from product_api.domain.repository import ProductRepository
from product_api.utils.cache import CacheService


class CachedProductRepository(ProductRepository):
    """
    Read-through Redis cache in front of another ProductRepository.

    Only single-product lookups are cached. Writes go straight to the
    wrapped repository, and the cached entry for the product is dropped
    after every update or delete so a deleted product is never served.
    """

    CACHE_PREFIX = "product"

    def __init__(self, inner: ProductRepository, cache: CacheService):
        self.inner = inner
        self.cache = cache

    def create(self, product: Product) -> Product:
        created = self.inner.create(product)
        self._cache_product(created)
        return created

    def find_by_id(self, product_id: int) -> Optional[Product]:
        cached = self.cache.get(self.CACHE_PREFIX, str(product_id))
        if cached:
            return self._from_cache(cached)

        product = self.inner.find_by_id(product_id)
        if product is not None:
            self._cache_product(product)
        return product

    def find_all(self) -> List[Product]:
        return self.inner.find_all()

    def update(self, product: Product) -> Product:
        try:
            updated = self.inner.update(product)
        finally:
            self._invalidate_cache(product.id)
        return updated

    def delete(self, product_id: int) -> bool:
        try:
            return self.inner.delete(product_id)
        finally:
            self._invalidate_cache(product_id)

    def _cache_product(self, product: Product) -> None:
        """Cache a product instance."""
        product_dict = {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "stock": product.stock,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
            "version": product.version,
        }
        self.cache.set(self.CACHE_PREFIX, str(product.id), product_dict)

    def _invalidate_cache(self, product_id: Optional[int]) -> None:
        """Invalidate cache for a product."""
        if product_id is not None:
            self.cache.delete(self.CACHE_PREFIX, str(product_id))

    @staticmethod
    def _from_cache(data: dict) -> Product:
        return Product(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            price=data["price"],
            stock=data["stock"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            version=data["version"],
        )
