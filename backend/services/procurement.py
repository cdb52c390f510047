"""
Procurement service.

La création d'un achat est la seule écriture multi-étapes du système :
en-tête, lignes et décréments de stock sont commités ensemble ou pas du tout.
Le prix vient TOUJOURS de l'article lu dans la transaction, jamais du client.

Concurrence sur un même article :
- verrou de ligne à la lecture (SELECT ... FOR UPDATE)
- décrément conditionnel (UPDATE ... WHERE stock >= qty)
- contrainte CHECK stock >= 0 sur `items` en dernier recours
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session, selectinload

from backend.app.core.errors import BadRequest, NotFound
from backend.app.db.base import utcnow
from backend.app.db.models.models_v1 import Item, Purchasing, PurchasingDetail
from backend.services import webhooks
from backend.services.suppliers import find_supplier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurchaseLine:
    item_id: int
    qty: int


def _with_relations(stmt: Select) -> Select:
    return stmt.options(
        selectinload(Purchasing.supplier),
        selectinload(Purchasing.user),
        selectinload(Purchasing.details).selectinload(PurchasingDetail.item),
    )


def locked_item_stmt(item_id: int) -> Select:
    # populate_existing : le stock est relu en base, pas dans l'identity map
    return (
        select(Item)
        .where(Item.id == item_id)
        .where(Item.deleted_at.is_(None))
        .with_for_update()
        .execution_options(populate_existing=True)
    )


def _insufficient_stock(item: Item, available: int, requested: int) -> BadRequest:
    return BadRequest(
        f"Insufficient stock for item '{item.name}'. "
        f"Available: {available}, Requested: {requested}"
    )


def _deduct_stock(db: Session, item: Item, qty: int) -> bool:
    """UPDATE conditionnel ; False si un achat concurrent a déjà consommé le stock."""
    result = db.execute(
        update(Item)
        .where(Item.id == item.id)
        .where(Item.stock >= qty)
        .values(stock=Item.stock - qty)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def list_purchases(db: Session) -> list[Purchasing]:
    stmt = _with_relations(
        select(Purchasing).where(Purchasing.deleted_at.is_(None)).order_by(Purchasing.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def get_purchase(db: Session, purchase_id: int) -> Purchasing:
    stmt = _with_relations(
        select(Purchasing).where(Purchasing.id == purchase_id).where(Purchasing.deleted_at.is_(None))
    ).execution_options(populate_existing=True)
    purchase = db.execute(stmt).scalar_one_or_none()
    if not purchase:
        raise NotFound("Purchase not found")
    return purchase


def create_purchase(
    db: Session,
    *,
    supplier_id: int,
    lines: Sequence[PurchaseLine],
    user_id: int,
) -> Purchasing:
    """
    Crée une commande et décrémente le stock de façon atomique.

    Les lignes sont traitées dans l'ordre de la requête ; un même article deux
    fois donne deux lignes indépendantes. Toute erreur annule l'en-tête, les
    lignes et les décréments. Après commit la commande est rechargée avec
    fournisseur, utilisateur et lignes, puis la notification webhook est planifiée.
    """
    if not supplier_id:
        raise BadRequest("Supplier ID is required")
    if not lines:
        raise BadRequest("At least one item is required")

    supplier = find_supplier(db, supplier_id)
    if not supplier:
        raise BadRequest("Supplier not found")

    try:
        purchase = Purchasing(
            date=utcnow(),
            supplier_id=supplier.id,
            user_id=user_id,
            grand_total=0,
        )
        db.add(purchase)
        db.flush()  # get purchase.id

        grand_total = 0.0
        for ln in lines:
            if not ln.item_id or ln.qty <= 0:
                raise BadRequest("Invalid item data: item_id and qty must be positive")

            item = db.execute(locked_item_stmt(ln.item_id)).scalar_one_or_none()
            if not item:
                raise BadRequest(f"Item with ID {ln.item_id} not found")

            if item.stock < ln.qty:
                raise _insufficient_stock(item, item.stock, ln.qty)

            sub_total = item.price * ln.qty
            grand_total += sub_total

            db.add(
                PurchasingDetail(
                    purchasing_id=purchase.id,
                    item_id=item.id,
                    qty=ln.qty,
                    sub_total=sub_total,
                )
            )
            db.flush()

            if not _deduct_stock(db, item, ln.qty):
                current = db.execute(select(Item.stock).where(Item.id == item.id)).scalar_one()
                raise _insufficient_stock(item, current, ln.qty)

        # prix x qty peut déborder en inf ; rien de non sérialisable ne doit être commité
        if not math.isfinite(grand_total):
            raise BadRequest("Purchase total is too large")

        purchase.grand_total = grand_total
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Purchase #%s created by user %s: supplier=%s lines=%s grand_total=%s",
        purchase.id,
        user_id,
        supplier_id,
        len(lines),
        grand_total,
    )

    result = get_purchase(db, purchase.id)
    webhooks.notify_purchase_created(result)
    return result
