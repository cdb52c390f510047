from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from backend.app.api.deps import get_current_identity, get_db
from backend.app.api.responses import envelope
from backend.app.core.security import Identity
from backend.app.schemas.purchasing import PurchasingRead
from backend.services import procurement
from backend.services.procurement import PurchaseLine

router = APIRouter(prefix="/purchases", dependencies=[Depends(get_current_identity)])


class PurchaseLineCreate(BaseModel):
    # un prix envoyé par le client est ignoré : seuls item_id et qty sont lus
    item_id: int = 0
    qty: int = 0


class PurchaseCreate(BaseModel):
    supplier_id: int = 0
    items: list[PurchaseLineCreate] = Field(default_factory=list)


@router.get("")
def list_purchases(db: Session = Depends(get_db)):
    return envelope([PurchasingRead.model_validate(p) for p in procurement.list_purchases(db)])


@router.get("/{purchase_id}")
def get_purchase(purchase_id: int, db: Session = Depends(get_db)):
    return envelope(PurchasingRead.model_validate(procurement.get_purchase(db, purchase_id)))


@router.post("", status_code=201)
def create_purchase(
    payload: PurchaseCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    purchase = procurement.create_purchase(
        db,
        supplier_id=payload.supplier_id,
        lines=[PurchaseLine(item_id=ln.item_id, qty=ln.qty) for ln in payload.items],
        user_id=identity.user_id,
    )
    return envelope(PurchasingRead.model_validate(purchase), "Purchase created successfully")
