from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.api.deps import get_current_identity, get_db
from backend.app.api.responses import envelope
from backend.app.schemas.item import ItemRead
from backend.services import inventory

router = APIRouter(prefix="/items", dependencies=[Depends(get_current_identity)])


class ItemWrite(BaseModel):
    name: str = ""
    stock: int = 0
    price: float = 0


@router.get("")
def list_items(db: Session = Depends(get_db)):
    return envelope([ItemRead.model_validate(i) for i in inventory.list_items(db)])


@router.get("/{item_id}")
def get_item(item_id: int, db: Session = Depends(get_db)):
    return envelope(ItemRead.model_validate(inventory.get_item(db, item_id)))


@router.post("", status_code=201)
def create_item(payload: ItemWrite, db: Session = Depends(get_db)):
    item = inventory.create_item(db, name=payload.name, stock=payload.stock, price=payload.price)
    return envelope(ItemRead.model_validate(item), "Item created successfully")


@router.put("/{item_id}")
def update_item(item_id: int, payload: ItemWrite, db: Session = Depends(get_db)):
    item = inventory.update_item(db, item_id, name=payload.name, stock=payload.stock, price=payload.price)
    return envelope(ItemRead.model_validate(item), "Item updated successfully")


@router.delete("/{item_id}")
def delete_item(item_id: int, db: Session = Depends(get_db)):
    inventory.delete_item(db, item_id)
    return envelope(message="Item deleted successfully")
