from fastapi import Depends
from sqlalchemy.orm import Session

from product_api.database import get_db
from product_api.domain.repository import ProductRepository
from product_api.repositories.cached_product_repository import CachedProductRepository
from product_api.repositories.product_repository import SqlAlchemyProductRepository
from product_api.services.product_service import ProductService
from product_api.utils.cache import get_cache_service


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """
    Build the repository for one request.

    The request's session is passed explicitly to the SQLAlchemy adapter;
    when Redis is configured the adapter is wrapped in the read-through cache.
    """
    repository = SqlAlchemyProductRepository(db)

    cache = get_cache_service()
    if cache is not None:
        return CachedProductRepository(repository, cache)

    return repository


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)
