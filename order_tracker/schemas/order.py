from pydantic import BaseModel
from typing import Any


class OrderCreate(BaseModel):
    id_pedido: str
    produtos: list[Any] = []

    class Config:
        # Clients often send numeric ids; the sheet stores them as text
        coerce_numbers_to_str = True


class OrderStatusUpdate(BaseModel):
    status: str


class OrderResponse(BaseModel):
    id_pedido: str
    status: str
    produtos: list[Any] = []
