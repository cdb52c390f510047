from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    String,
    Integer,
    BigInteger,
    DateTime,
    Float,
    ForeignKey,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base, SoftDeleteMixin, TimestampMixin

DEFAULT_ROLE = "user"

# sqlite n'auto-incrémente que INTEGER PRIMARY KEY
PK = BigInteger().with_variant(Integer(), "sqlite")


# ---------- AUTH ----------
class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(PK, primary_key=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash
    role: Mapped[str] = mapped_column(String(50), default=DEFAULT_ROLE, nullable=False)


# ---------- MASTER DATA ----------
class Supplier(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "suppliers"
    id: Mapped[int] = mapped_column(PK, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100))
    address: Mapped[str | None] = mapped_column(Text)


class Item(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "items"
    id: Mapped[int] = mapped_column(PK, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    price: Mapped[float] = mapped_column(Float, default=0, nullable=False)

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_item_stock_nonneg"),
        CheckConstraint("price >= 0", name="ck_item_price_nonneg"),
    )


# ---------- PROCUREMENT ----------
class Purchasing(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "purchasings"
    id: Mapped[int] = mapped_column(PK, primary_key=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    supplier_id: Mapped[int] = mapped_column(
        ForeignKey("suppliers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    grand_total: Mapped[float] = mapped_column(Float, default=0, nullable=False)

    supplier: Mapped[Supplier] = relationship()
    user: Mapped[User] = relationship()
    details: Mapped[list["PurchasingDetail"]] = relationship(
        back_populates="purchasing",
        cascade="all, delete-orphan",
        order_by="PurchasingDetail.id",
    )


class PurchasingDetail(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "purchasing_details"
    id: Mapped[int] = mapped_column(PK, primary_key=True)
    purchasing_id: Mapped[int] = mapped_column(
        ForeignKey("purchasings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id", ondelete="RESTRICT"), nullable=False)
    qty: Mapped[int] = mapped_column(Integer, nullable=False)
    sub_total: Mapped[float] = mapped_column(Float, default=0, nullable=False)  # price at purchase time x qty

    purchasing: Mapped[Purchasing] = relationship(back_populates="details")
    item: Mapped[Item] = relationship()

    __table_args__ = (CheckConstraint("qty > 0", name="ck_purchasing_detail_qty_pos"),)
