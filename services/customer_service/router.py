from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security import LOGIN_RATE_LIMIT, get_current_customer, limiter

from .schemas import (
    AddressUpdate,
    AuthResponse,
    CreditCardUpdate,
    CustomerCreate,
    CustomerLogin,
    CustomerProfile,
    CustomerUpdate,
)
from .service import CustomerService

router = APIRouter(tags=["Customers"])


@router.post(
    "/customers",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer account",
)
@limiter.limit(LOGIN_RATE_LIMIT)
async def register(request: Request, payload: CustomerCreate, db: AsyncSession = Depends(get_db)):
    return await CustomerService.register(db, payload)


@router.post(
    "/customers/login",
    response_model=AuthResponse,
    summary="Authenticate and receive a bearer access token",
)
@limiter.limit(LOGIN_RATE_LIMIT)
async def login(request: Request, payload: CustomerLogin, db: AsyncSession = Depends(get_db)):
    return await CustomerService.login(db, payload)


@router.get("/customer", response_model=CustomerProfile, summary="Get the authenticated customer's profile")
async def get_profile(
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await CustomerService.get_customer(db, customer_id)


@router.put("/customer", response_model=CustomerProfile, summary="Update name, email, password and phones")
async def update_profile(
    payload: CustomerUpdate,
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await CustomerService.update_profile(db, customer_id, payload)


@router.put("/customers/address", response_model=CustomerProfile, summary="Update the shipping address")
async def update_address(
    payload: AddressUpdate,
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await CustomerService.update_address(db, customer_id, payload)


@router.put("/customers/creditCard", response_model=CustomerProfile, summary="Update the stored card number")
async def update_credit_card(
    payload: CreditCardUpdate,
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await CustomerService.update_credit_card(db, customer_id, payload)
