"""
Cart endpoints are public: a cart is a bag of lines keyed by an opaque id,
not an access-controlled resource until it is checked out through /orders.
"""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db

from .schemas import (
    CartIdResponse,
    CartItemCreate,
    CartItemResponse,
    CartItemUpdate,
    CartResponse,
    EmptyCartResponse,
    RemovedResponse,
)
from .service import CartService

router = APIRouter(prefix="/shoppingcart", tags=["Shopping Cart"])


@router.get("/generateUniqueId", response_model=CartIdResponse)
async def generate_unique_id():
    return {"cart_id": CartService.generate_cart_id()}


@router.post("/add", response_model=CartItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(item: CartItemCreate, db: AsyncSession = Depends(get_db)):
    return await CartService.add_item(db, item)


@router.put("/update/{item_id}", response_model=CartItemResponse)
async def update_item(
    payload: CartItemUpdate,
    item_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await CartService.update_item(db, item_id, payload.quantity)


@router.delete("/empty/{cart_id}", response_model=EmptyCartResponse)
async def empty_cart(cart_id: str, db: AsyncSession = Depends(get_db)):
    return await CartService.empty_cart(db, cart_id)


@router.delete("/removeProduct/{item_id}", response_model=RemovedResponse)
async def remove_item(
    item_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await CartService.remove_item(db, item_id)


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str, db: AsyncSession = Depends(get_db)):
    return await CartService.get_cart(db, cart_id)
