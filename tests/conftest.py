import os

# Must be set before the application modules are imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ.pop("OTLP_ENDPOINT", None)

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import NullPool
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from main import app
from shared.config.database import Base, get_db
from shared.security import create_access_token, hash_password
from services.attribute_service.models import Attribute, AttributeValue, ProductAttribute
from services.customer_service.models import Customer
from services.product_service.models import Category, Department, Product, ProductCategory
from services.shipping_service.models import Shipping, ShippingRegion
from services.tax_service.models import Tax

LONG_DESCRIPTION = "A" * 250


@pytest.fixture
async def engine(tmp_path):
    """A file backed SQLite database per test so sessions really are separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def catalog(db):
    """Departments, categories, products and attributes plus tax and shipping rates."""
    db.add_all([
        Department(department_id=1, name="Regional", description="Proud of your country?"),
        Department(department_id=2, name="Nature", description="Find beautiful shirts with animals."),
        Department(department_id=3, name="Seasonal", description="Nothing here yet."),
    ])
    db.add_all([
        Category(category_id=1, department_id=1, name="French", description="The French have always had an eye for beauty."),
        Category(category_id=2, department_id=1, name="Italian", description="The full and resplendent treasure chest."),
        Category(category_id=3, department_id=2, name="Animal", description="Our ever-growing selection of beautiful animal T-shirts."),
    ])
    db.add_all([
        Product(product_id=1, name="Arc d'Triomphe", description=LONG_DESCRIPTION, price=10.00,
                discounted_price=0, image="arc.gif", thumbnail="arc-thumb.gif", display=0),
        Product(product_id=2, name="Chartres Cathedral", description="The Fur Merchants", price=5.00,
                discounted_price=0, image="chartres.gif", thumbnail="chartres-thumb.gif", display=2),
        Product(product_id=3, name="Coat of Arms", description="Italian coat of arms", price=20.00,
                discounted_price=15.00, image="coat.gif", thumbnail="coat-thumb.gif", display=0),
        Product(product_id=4, name="Blue Whale Shirt", description="Whale", price=12.50,
                discounted_price=0, image="whale.gif", thumbnail="whale-thumb.gif", display=1),
    ])
    db.add_all([
        ProductCategory(product_id=1, category_id=1),
        ProductCategory(product_id=2, category_id=1),
        ProductCategory(product_id=2, category_id=2),
        ProductCategory(product_id=3, category_id=2),
        ProductCategory(product_id=4, category_id=3),
    ])
    db.add_all([
        Attribute(attribute_id=1, name="Size"),
        Attribute(attribute_id=2, name="Color"),
        AttributeValue(attribute_value_id=1, attribute_id=1, value="S"),
        AttributeValue(attribute_value_id=2, attribute_id=1, value="M"),
        AttributeValue(attribute_value_id=3, attribute_id=2, value="White"),
        ProductAttribute(product_id=1, attribute_value_id=1),
        ProductAttribute(product_id=1, attribute_value_id=3),
    ])
    db.add_all([
        Tax(tax_id=1, tax_type="Sales Tax at 10%", tax_percentage=10.00),
        Tax(tax_id=2, tax_type="No Tax", tax_percentage=0.00),
        ShippingRegion(shipping_region_id=1, shipping_region="Please Select"),
        ShippingRegion(shipping_region_id=2, shipping_region="US / Canada"),
        Shipping(shipping_id=1, shipping_type="Next Day Delivery ($20)", shipping_cost=20.00, shipping_region_id=2),
        Shipping(shipping_id=2, shipping_type="3-4 Days ($10)", shipping_cost=10.00, shipping_region_id=2),
    ])
    await db.commit()


async def _make_customer(db, name: str, email: str, password: str = "secret123") -> Customer:
    customer = Customer(name=name, email=email, password=hash_password(password), shipping_region_id=1)
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


@pytest.fixture
async def customer(db):
    return await _make_customer(db, "Ada Lovelace", "ada@example.com")


@pytest.fixture
async def other_customer(db):
    return await _make_customer(db, "Grace Hopper", "grace@example.com")


def bearer(customer: Customer) -> dict:
    return {"Authorization": f"Bearer {create_access_token(customer.customer_id)}"}


@pytest.fixture
def auth_headers(customer):
    return bearer(customer)


@pytest.fixture
def other_auth_headers(other_customer):
    return bearer(other_customer)
