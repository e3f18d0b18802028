import uuid

import structlog
from sqlalchemy.exc import DataError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound, ValidationError
from shared.observability import ecomm_cart_items_added_total
from services.product_service.repository import ProductRepository

from .repository import CartRepository
from .schemas import CartItemCreate

logger = structlog.get_logger(__name__)


def cart_line(item, product) -> dict:
    unit_price = product.unit_price
    return {
        "item_id": item.item_id,
        "cart_id": item.cart_id,
        "product_id": item.product_id,
        "attributes": item.attributes,
        "quantity": item.quantity,
        "name": product.name,
        "price": product.price,
        "discounted_price": product.discounted_price,
        "image": product.image,
        "unit_price": unit_price,
        "subtotal": round(item.quantity * unit_price, 2),
    }


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than zero; remove the item instead")


class CartService:
    @staticmethod
    def generate_cart_id() -> str:
        return uuid.uuid4().hex

    @staticmethod
    async def add_item(db: AsyncSession, data: CartItemCreate) -> dict:
        _require_positive(data.quantity)
        product = await ProductRepository.get_product_by_id(db, data.product_id)
        if not product:
            raise ValidationError(f"Product with id {data.product_id} does not exist")

        try:
            item_id = await CartRepository.upsert_item(
                db, data.cart_id, data.product_id, data.attributes, data.quantity
            )
        except DataError:
            # merged quantity overflowed the column
            await db.rollback()
            raise ValidationError("Quantity is too large")
        ecomm_cart_items_added_total.inc()
        logger.info(
            "cart_item_added",
            cart_id=data.cart_id,
            product_id=data.product_id,
            quantity=data.quantity,
            item_id=item_id,
        )
        item, product = await CartRepository.get_line(db, item_id)
        return cart_line(item, product)

    @staticmethod
    async def get_cart(db: AsyncSession, cart_id: str) -> dict:
        lines = [cart_line(item, product) for item, product in await CartRepository.get_cart_lines(db, cart_id)]
        return {
            "cart_id": cart_id,
            "rows": lines,
            "total_amount": round(sum(line["subtotal"] for line in lines), 2),
        }

    @staticmethod
    async def update_item(db: AsyncSession, item_id: int, quantity: int) -> dict:
        _require_positive(quantity)
        updated = await CartRepository.update_quantity(db, item_id, quantity)
        if not updated:
            raise NotFound(f"Cart item with id {item_id} does not exist")

        item, product = await CartRepository.get_line(db, item_id)
        return cart_line(item, product)

    @staticmethod
    async def remove_item(db: AsyncSession, item_id: int) -> dict:
        removed = await CartRepository.remove_item(db, item_id)
        logger.info("cart_item_removed", item_id=item_id, removed=removed)
        return {"removed": removed}

    @staticmethod
    async def empty_cart(db: AsyncSession, cart_id: str) -> dict:
        removed = await CartRepository.clear_cart(db, cart_id)
        logger.info("cart_emptied", cart_id=cart_id, removed=removed)
        return {"rows": [], "removed": removed}
