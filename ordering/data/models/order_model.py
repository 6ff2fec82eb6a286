"""SQLAlchemy ORM models for orders and their reference data."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ordering.data.types import GuidBytes, MoneyDecimal

from .base import Base

MONEY = MoneyDecimal(18, 4)


class OrderStatusModel(Base):
    """SQLAlchemy ORM model for order_status reference table."""

    __tablename__ = "order_status"

    id: Mapped[uuid.UUID] = mapped_column(GuidBytes, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)


class ServiceModel(Base):
    """SQLAlchemy ORM model for order_service reference table."""

    __tablename__ = "order_service"

    id: Mapped[uuid.UUID] = mapped_column(GuidBytes, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    products: Mapped[List["ProductModel"]] = relationship(back_populates="service")


class ProductModel(Base):
    """SQLAlchemy ORM model for order_product reference table."""

    __tablename__ = "order_product"

    id: Mapped[uuid.UUID] = mapped_column(GuidBytes, primary_key=True, default=uuid.uuid4)
    service_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, ForeignKey("order_service.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    unit_cost: Mapped[Optional[Decimal]] = mapped_column(MONEY, nullable=True)
    unit_price: Mapped[Optional[Decimal]] = mapped_column(MONEY, nullable=True)

    service: Mapped["ServiceModel"] = relationship(back_populates="products")


class OrderModel(Base):
    """SQLAlchemy ORM model for order table."""

    __tablename__ = "order"

    id: Mapped[uuid.UUID] = mapped_column(GuidBytes, primary_key=True)
    reseller_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, nullable=False)
    customer_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, nullable=False)
    status_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, ForeignKey("order_status.id"), nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    status: Mapped["OrderStatusModel"] = relationship()
    items: Mapped[List["OrderItemModel"]] = relationship(
        back_populates="order", cascade="all, delete-orphan", order_by="OrderItemModel.id"
    )


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_item table."""

    __tablename__ = "order_item"

    id: Mapped[uuid.UUID] = mapped_column(GuidBytes, primary_key=True)
    order_id: Mapped[uuid.UUID] = mapped_column(
        GuidBytes, ForeignKey("order.id", ondelete="CASCADE"), nullable=False
    )
    service_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, ForeignKey("order_service.id"), nullable=False)
    product_id: Mapped[uuid.UUID] = mapped_column(GuidBytes, ForeignKey("order_product.id"), nullable=False)
    quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    order: Mapped["OrderModel"] = relationship(back_populates="items")
    service: Mapped["ServiceModel"] = relationship()
    product: Mapped["ProductModel"] = relationship()
