from datetime import datetime

from pydantic import BaseModel


class ItemRead(BaseModel):
    id: int
    name: str
    stock: int
    price: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
