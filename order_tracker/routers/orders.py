from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from order_tracker.auth import TokenClaims, require_role
from order_tracker.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from order_tracker.services.order_service import OrderService
from order_tracker.store import get_order_service

router = APIRouter()


@router.post("", response_class=PlainTextResponse)
async def create_order(
    data: OrderCreate,
    orders: OrderService = Depends(get_order_service),
    current_user: TokenClaims = Depends(require_role("releaser_role")),
):
    await orders.create(data.id_pedido, data.produtos)
    return "Order created successfully"


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    orders: OrderService = Depends(get_order_service),
    current_user: TokenClaims = Depends(require_role("packer_role")),
):
    return [
        OrderResponse(id_pedido=o.order_id, status=o.status, produtos=o.products)
        for o in await orders.list_orders()
    ]


@router.put("/{id_pedido}", response_class=PlainTextResponse)
async def update_order_status(
    id_pedido: str,
    data: OrderStatusUpdate,
    orders: OrderService = Depends(get_order_service),
    current_user: TokenClaims = Depends(require_role("packer_role")),
):
    await orders.update_status(id_pedido, data.status)
    return "Status updated successfully"
