from datetime import datetime

from pydantic import BaseModel


class SupplierRead(BaseModel):
    id: int
    name: str
    email: str | None = None
    address: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
