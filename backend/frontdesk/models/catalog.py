"""Product catalog and room pricing models."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import String, DateTime, Enum as SQLEnum, Text, Integer, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from frontdesk.core.database import Base
from frontdesk.models.enums import ProductCategory, RoomCategory


class Product(Base):
    """A sellable item, offered as a suggestion when posting consumption."""

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[ProductCategory] = mapped_column(
        SQLEnum(ProductCategory),
        default=ProductCategory.OTHER,
        nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, default=0)
    min_stock: Mapped[int] = mapped_column(Integer, default=0)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )


class RoomRate(Base):
    """Configured daily rate for a room category."""

    __tablename__ = "room_rates"

    category: Mapped[RoomCategory] = mapped_column(
        SQLEnum(RoomCategory),
        primary_key=True,
    )
    daily_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )
