from datetime import datetime, timezone
from typing import Callable, List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from product_api.domain.exceptions import ConcurrentModification, InvalidArgument, NotFound
from product_api.domain.product import Product
from product_api.domain.repository import ProductRepository
from product_api.models.product import ProductModel

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back out
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlAlchemyProductRepository(ProductRepository):
    """
    ProductRepository adapter backed by a SQLAlchemy session.

    The session is created by the caller (one per request) and passed in;
    this class never opens connections on its own. Every write commits, and
    any database failure rolls the session back before propagating.

    Lost updates are prevented with the ``version`` column: an update built
    from a snapshot whose version no longer matches the stored row raises
    ConcurrentModification instead of overwriting the newer state.
    """

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    def create(self, product: Product) -> Product:
        """
        Insert a new product.

        Args:
            product: Unpersisted product (id must be None)

        Returns:
            The stored product with id, timestamps and version assigned
        """
        if product.is_persisted:
            raise InvalidArgument("Product ID must not be set on create")

        now = self.clock()
        row = ProductModel(
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating product '{product.name}': {e}")
            raise

        self.db.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        row = self._get_row(product_id)
        return self._to_entity(row) if row else None

    def find_all(self) -> List[Product]:
        rows = (
            self.db.query(ProductModel)
            .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            .all()
        )
        return [self._to_entity(row) for row in rows]

    def update(self, product: Product) -> Product:
        """
        Write the full state of ``product`` over its stored row.

        Raises:
            InvalidArgument: If the product has no id
            NotFound: If the row was deleted in the meantime
            ConcurrentModification: If the row changed since the product was read
        """
        if not product.is_persisted:
            raise InvalidArgument("Product ID is required for update")

        row = self._get_row(product.id)
        if not row:
            raise NotFound(f"Product with ID {product.id} not found")

        if row.version != product.version:
            raise ConcurrentModification(
                f"Product with ID {product.id} was modified concurrently"
            )

        row.name = product.name
        row.description = product.description
        row.price = product.price
        row.stock = product.stock
        row.updated_at = max(self.clock(), _as_utc(row.created_at))

        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            logger.warning(f"Concurrent update detected for product #{product.id}")
            raise ConcurrentModification(
                f"Product with ID {product.id} was modified concurrently"
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating product #{product.id}: {e}")
            raise

        self.db.refresh(row)
        return self._to_entity(row)

    def delete(self, product_id: int) -> bool:
        try:
            deleted = (
                self.db.query(ProductModel)
                .filter(ProductModel.id == product_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting product #{product_id}: {e}")
            raise

        return deleted > 0

    def _get_row(self, product_id: int) -> Optional[ProductModel]:
        return self.db.query(ProductModel).filter(ProductModel.id == product_id).first()

    @staticmethod
    def _to_entity(row: ProductModel) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            stock=row.stock,
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
            version=row.version,
        )
