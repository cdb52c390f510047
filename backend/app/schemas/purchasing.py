from datetime import datetime

from pydantic import BaseModel

from backend.app.schemas.item import ItemRead
from backend.app.schemas.supplier import SupplierRead
from backend.app.schemas.user import UserRead


class PurchasingDetailRead(BaseModel):
    id: int
    purchasing_id: int
    item_id: int
    item: ItemRead
    qty: int
    sub_total: float  # frozen at creation, never recomputed
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PurchasingRead(BaseModel):
    id: int
    date: datetime
    supplier_id: int
    supplier: SupplierRead
    user_id: int
    user: UserRead
    grand_total: float
    details: list[PurchasingDetailRead]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
