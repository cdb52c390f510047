from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.api.deps import get_current_identity, get_db
from backend.app.api.responses import envelope
from backend.app.schemas.supplier import SupplierRead
from backend.services import suppliers

router = APIRouter(prefix="/suppliers", dependencies=[Depends(get_current_identity)])


class SupplierWrite(BaseModel):
    name: str = ""
    email: str | None = None
    address: str | None = None


@router.get("")
def list_suppliers(db: Session = Depends(get_db)):
    return envelope([SupplierRead.model_validate(s) for s in suppliers.list_suppliers(db)])


@router.get("/{supplier_id}")
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return envelope(SupplierRead.model_validate(suppliers.get_supplier(db, supplier_id)))


@router.post("", status_code=201)
def create_supplier(payload: SupplierWrite, db: Session = Depends(get_db)):
    s = suppliers.create_supplier(db, name=payload.name, email=payload.email, address=payload.address)
    return envelope(SupplierRead.model_validate(s), "Supplier created successfully")


@router.put("/{supplier_id}")
def update_supplier(supplier_id: int, payload: SupplierWrite, db: Session = Depends(get_db)):
    s = suppliers.update_supplier(
        db,
        supplier_id,
        name=payload.name,
        email=payload.email,
        address=payload.address,
    )
    return envelope(SupplierRead.model_validate(s), "Supplier updated successfully")


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    suppliers.delete_supplier(db, supplier_id)
    return envelope(message="Supplier deleted successfully")
