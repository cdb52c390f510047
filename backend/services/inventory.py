from __future__ import annotations

import math

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.core.errors import BadRequest, NotFound
from backend.app.db.base import utcnow
from backend.app.db.models.models_v1 import Item


def _validate(name: str, stock: int, price: float) -> None:
    if not name:
        raise BadRequest("Item name is required")
    # inf/nan ne sont pas sérialisables en JSON
    if not math.isfinite(price):
        raise BadRequest("Price must be a finite number")
    if price < 0:
        raise BadRequest("Price cannot be negative")
    if stock < 0:
        raise BadRequest("Stock cannot be negative")


def find_item(db: Session, item_id: int) -> Item | None:
    """Article vivant ou None (les lignes soft-deleted sont invisibles)."""
    return db.execute(
        select(Item).where(Item.id == item_id).where(Item.deleted_at.is_(None))
    ).scalar_one_or_none()


def list_items(db: Session) -> list[Item]:
    return list(
        db.execute(select(Item).where(Item.deleted_at.is_(None)).order_by(Item.id)).scalars().all()
    )


def get_item(db: Session, item_id: int) -> Item:
    item = find_item(db, item_id)
    if not item:
        raise NotFound("Item not found")
    return item


def create_item(db: Session, *, name: str, stock: int, price: float) -> Item:
    _validate(name, stock, price)

    item = Item(name=name, stock=stock, price=price)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_item(db: Session, item_id: int, *, name: str, stock: int, price: float) -> Item:
    item = get_item(db, item_id)
    _validate(name, stock, price)

    item.name = name
    item.stock = stock
    item.price = price
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, item_id: int) -> None:
    item = get_item(db, item_id)
    item.deleted_at = utcnow()
    db.commit()
