from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.core.errors import BadRequest, NotFound
from backend.app.db.base import utcnow
from backend.app.db.models.models_v1 import Supplier


def find_supplier(db: Session, supplier_id: int) -> Supplier | None:
    return db.execute(
        select(Supplier).where(Supplier.id == supplier_id).where(Supplier.deleted_at.is_(None))
    ).scalar_one_or_none()


def list_suppliers(db: Session) -> list[Supplier]:
    return list(
        db.execute(select(Supplier).where(Supplier.deleted_at.is_(None)).order_by(Supplier.id))
        .scalars()
        .all()
    )


def get_supplier(db: Session, supplier_id: int) -> Supplier:
    s = find_supplier(db, supplier_id)
    if not s:
        raise NotFound("Supplier not found")
    return s


def create_supplier(db: Session, *, name: str, email: str | None = None, address: str | None = None) -> Supplier:
    if not name:
        raise BadRequest("Supplier name is required")

    s = Supplier(name=name, email=email, address=address)
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def update_supplier(
    db: Session,
    supplier_id: int,
    *,
    name: str,
    email: str | None = None,
    address: str | None = None,
) -> Supplier:
    s = get_supplier(db, supplier_id)
    if not name:
        raise BadRequest("Supplier name is required")

    s.name = name
    s.email = email
    s.address = address
    db.commit()
    db.refresh(s)
    return s


def delete_supplier(db: Session, supplier_id: int) -> None:
    s = get_supplier(db, supplier_id)
    s.deleted_at = utcnow()
    db.commit()
