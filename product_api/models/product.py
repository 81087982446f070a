from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, CheckConstraint

from product_api.database import Base


class ProductModel(Base):
    """
    Table mapping for the Product entity.

    Attributes:
        id: Unique identifier for the product
        name: Product name
        description: Free-form description (may be empty)
        price: Product price (must be non-negative)
        stock: Available quantity (must be non-negative)
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
        version: Optimistic-concurrency counter checked on every UPDATE
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False)

    # Database-level constraints to ensure data integrity
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('stock >= 0', name='check_stock_non_negative'),
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name='{self.name}', stock={self.stock})>"
