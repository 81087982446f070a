"""Product entity.

A plain dataclass with no knowledge of storage. The SQLAlchemy mapping
lives in product_api.models.product and is converted to and from this
entity by the repository adapter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from product_api.domain.exceptions import ValidationError

NAME_MAX_LENGTH = 255


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


def _is_whole_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, float):
        return value.is_integer()
    return False


@dataclass
class Product:
    """A product in the catalog.

    ``id``, ``created_at``, ``updated_at`` and ``version`` are assigned by
    the repository on first persist; a freshly created product has none
    of them.
    """

    name: str
    description: str
    price: float
    stock: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 0

    @classmethod
    def create(cls, name: str, description: str, price: float, stock: int) -> "Product":
        """Build a new, unpersisted product."""
        return cls(name=name, description=description, price=price, stock=stock)

    def validate(self) -> None:
        """Check field constraints, raising on the first violation.

        Raises:
            ValidationError: If name, price or stock is invalid
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name required")

        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError("name too long")

        if not _is_number(self.price) or self.price < 0:
            raise ValidationError("price must be non-negative")

        if not _is_whole_number(self.stock) or self.stock < 0:
            raise ValidationError("stock must be non-negative integer")

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
