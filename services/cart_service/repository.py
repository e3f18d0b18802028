from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from services.product_service.models import Product
from .models import ShoppingCart

# Dialects whose INSERT supports ON CONFLICT ... DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def _upsert_insert(db: AsyncSession):
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Cart upsert is not supported on the {dialect} dialect") from None


class CartRepository:
    @staticmethod
    async def upsert_item(
        db: AsyncSession, cart_id: str, product_id: int, attributes: str, quantity: int
    ) -> int:
        """
        Adds `quantity` to the cart line for (cart_id, product_id, attributes),
        creating it if needed, in a single INSERT ... ON CONFLICT statement.
        Returns the line's item_id.
        """
        insert = _upsert_insert(db)
        stmt = insert(ShoppingCart).values(
            cart_id=cart_id,
            product_id=product_id,
            attributes=attributes,
            quantity=quantity,
            buy_now=1,
            added_on=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["cart_id", "product_id", "attributes"],
            set_={"quantity": ShoppingCart.quantity + stmt.excluded.quantity},
        ).returning(ShoppingCart.item_id)

        result = await db.execute(stmt)
        item_id = result.scalar_one()
        await db.commit()
        return item_id

    @staticmethod
    async def get_line(db: AsyncSession, item_id: int):
        result = await db.execute(
            select(ShoppingCart, Product)
            .join(Product, Product.product_id == ShoppingCart.product_id)
            .where(ShoppingCart.item_id == item_id)
            .execution_options(populate_existing=True)
        )
        return result.first()

    @staticmethod
    async def get_cart_lines(db: AsyncSession, cart_id: str, lock: bool = False):
        """
        Cart lines joined with their product. `lock=True` takes row locks on the
        cart lines (SELECT ... FOR UPDATE) so two checkouts of the same cart serialise.
        """
        stmt = (
            select(ShoppingCart, Product)
            .join(Product, Product.product_id == ShoppingCart.product_id)
            .where(ShoppingCart.cart_id == cart_id)
            .order_by(ShoppingCart.item_id)
            .execution_options(populate_existing=True)
        )
        if lock:
            stmt = stmt.with_for_update(of=ShoppingCart)
        result = await db.execute(stmt)
        return result.all()

    @staticmethod
    async def update_quantity(db: AsyncSession, item_id: int, quantity: int) -> int:
        result = await db.execute(
            update(ShoppingCart).where(ShoppingCart.item_id == item_id).values(quantity=quantity)
        )
        await db.commit()
        return result.rowcount

    @staticmethod
    async def remove_item(db: AsyncSession, item_id: int) -> int:
        result = await db.execute(delete(ShoppingCart).where(ShoppingCart.item_id == item_id))
        await db.commit()
        return result.rowcount

    @staticmethod
    async def delete_cart_lines(db: AsyncSession, cart_id: str) -> int:
        """Deletes the cart's lines without committing, for use inside a larger transaction."""
        result = await db.execute(delete(ShoppingCart).where(ShoppingCart.cart_id == cart_id))
        return result.rowcount

    @staticmethod
    async def clear_cart(db: AsyncSession, cart_id: str) -> int:
        removed = await CartRepository.delete_cart_lines(db, cart_id)
        await db.commit()
        return removed
