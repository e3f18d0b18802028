"""
Customer accounts: registration, login and profile maintenance.

Every profile operation works on the customer id carried by the bearer token;
callers never pass a customer id of their own.
"""
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import Conflict, Forbidden, NotFound, Unauthorized, ValidationError
from shared.observability import ecomm_customer_registrations_total, ecomm_login_attempts_total
from shared.security import (
    TOKEN_TYPE,
    create_access_token,
    expires_in_label,
    hash_password,
    verify_password,
)
from services.shipping_service.repository import ShippingRepository

from .models import Customer
from .repository import CustomerRepository
from .schemas import (
    AddressUpdate,
    AuthResponse,
    CreditCardUpdate,
    CustomerCreate,
    CustomerLogin,
    CustomerProfile,
    CustomerUpdate,
)

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Email or password is invalid"


def _auth_response(customer: Customer) -> AuthResponse:
    token = create_access_token(customer.customer_id)
    return AuthResponse(
        customer=CustomerProfile.model_validate(customer),
        accessToken=f"{TOKEN_TYPE} {token}",
        expires_in=expires_in_label(),
    )


class CustomerService:

    @staticmethod
    async def register(db: AsyncSession, data: CustomerCreate) -> AuthResponse:
        email = data.email.lower()
        existing = await CustomerRepository.get_by_email(db, email)
        if existing:
            raise Conflict(f"Customer with email {email} already exists")

        customer = Customer(
            name=data.name,
            email=email,
            password=hash_password(data.password),
        )
        try:
            customer = await CustomerRepository.create(db, customer)
        except IntegrityError:
            await db.rollback()
            # Only a concurrent registration of the same email is a conflict.
            if await CustomerRepository.get_by_email(db, email):
                raise Conflict(f"Customer with email {email} already exists")
            raise

        ecomm_customer_registrations_total.inc()
        logger.info("customer_registered", customer_id=customer.customer_id)
        return _auth_response(customer)

    @staticmethod
    async def login(db: AsyncSession, data: CustomerLogin) -> AuthResponse:
        customer = await CustomerRepository.get_by_email(db, data.email.lower())
        # Unknown email and wrong password are reported identically.
        if not customer or not verify_password(data.password, customer.password):
            ecomm_login_attempts_total.labels(status="failed").inc()
            logger.info("login_failed")
            raise Unauthorized(INVALID_CREDENTIALS)

        ecomm_login_attempts_total.labels(status="success").inc()
        logger.info("login_succeeded", customer_id=customer.customer_id)
        return _auth_response(customer)

    @staticmethod
    async def get_customer(db: AsyncSession, customer_id: int) -> Customer:
        customer = await CustomerRepository.get_by_id(db, customer_id)
        if not customer:
            raise NotFound("Customer does not exist")
        return customer

    @staticmethod
    async def update_profile(db: AsyncSession, customer_id: int, data: CustomerUpdate) -> Customer:
        customer = await CustomerService.get_customer(db, customer_id)
        email = data.email.lower()
        if await CustomerRepository.email_taken_by_other(db, email, customer_id):
            raise Forbidden("Email already taken")

        customer.name = data.name
        customer.email = email
        customer.day_phone = data.day_phone
        customer.eve_phone = data.eve_phone
        customer.mob_phone = data.mob_phone
        if data.password:
            customer.password = hash_password(data.password)

        try:
            customer = await CustomerRepository.save(db, customer)
        except IntegrityError:
            await db.rollback()
            raise Forbidden("Email already taken")
        logger.info("customer_profile_updated", customer_id=customer_id)
        return customer

    @staticmethod
    async def update_address(db: AsyncSession, customer_id: int, data: AddressUpdate) -> Customer:
        customer = await CustomerService.get_customer(db, customer_id)
        region = await ShippingRepository.get_region(db, data.shipping_region_id)
        if not region:
            raise ValidationError(f"Shipping region {data.shipping_region_id} does not exist")

        for field, value in data.model_dump().items():
            setattr(customer, field, value)

        customer = await CustomerRepository.save(db, customer)
        logger.info("customer_address_updated", customer_id=customer_id)
        return customer

    @staticmethod
    async def update_credit_card(db: AsyncSession, customer_id: int, data: CreditCardUpdate) -> Customer:
        customer = await CustomerService.get_customer(db, customer_id)
        customer.credit_card = data.credit_card
        customer = await CustomerRepository.save(db, customer)
        logger.info("customer_credit_card_updated", customer_id=customer_id)
        return customer
