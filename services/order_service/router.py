from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import MAX_INTEGER, get_db
from shared.security import get_current_customer
from .schemas import (
    OrderCreate,
    OrderCreatedResponse,
    OrderListResponse,
    OrderShortDetail,
    OrderSummaryResponse,
)
from .service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

@router.post("", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    order: OrderCreate,
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    order_id = await OrderService.create_order(db, customer_id, order)
    return {"order_id": order_id}

@router.get("/inCustomer", response_model=OrderListResponse)
async def list_customer_orders(
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await OrderService.list_customer_orders(db, customer_id)}

@router.get("/shortDetail/{order_id}", response_model=OrderShortDetail)
async def get_order_short_detail(
    order_id: int = Path(ge=1, le=MAX_INTEGER),
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.get_order_short_detail(db, customer_id, order_id)

@router.get("/{order_id}", response_model=OrderSummaryResponse)
async def get_order_summary(
    order_id: int = Path(ge=1, le=MAX_INTEGER),
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.get_order_summary(db, customer_id, order_id)
