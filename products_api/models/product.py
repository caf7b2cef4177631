"""Product ORM: the single persisted resource.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - price > 0 for every stored row (CHECK constraint backs the request rules)
    - availability defaults to true on insert
    - created_at/updated_at are managed here and never serialized to clients

Design Decisions:
    - Float for price: amounts arrive as JSON numbers or numeric strings and are
      echoed back as JSON numbers
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from products_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """A product with a name, a positive price and an availability flag."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
