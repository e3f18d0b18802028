import os

from fastapi import FastAPI
from shared.config.database import engine, Base
from shared.exceptions import register_exception_handlers
from shared.observability import setup_observability
from shared.security import limiter

# IMPORTANT: import models so they register with Base
from services.shipping_service import models as shipping_models
from services.tax_service import models as tax_models
from services.product_service import models as product_models
from services.attribute_service import models as attribute_models
from services.customer_service import models as customer_models
from services.cart_service import models as cart_models
from services.order_service import models as order_models
from services.review_service import models as review_models

from services.product_service.router import router as product_router
from services.attribute_service.router import router as attribute_router
from services.customer_service.router import router as customer_router
from services.cart_service.router import router as cart_router
from services.order_service.router import router as order_router
from services.review_service.router import router as review_router
from services.tax_service.router import router as tax_router
from services.shipping_service.router import router as shipping_router

CREATE_TABLES_ON_STARTUP = os.getenv("CREATE_TABLES_ON_STARTUP", "false").lower() == "true"

app = FastAPI(
    title="Storefront API",
    version="1.0.0",
    description="Customers, catalog, shopping cart and orders.",
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, "storefront_api")

# --- ERRORS & SECURITY ---
register_exception_handlers(app)
app.state.limiter = limiter

app.include_router(customer_router)
app.include_router(product_router)
app.include_router(attribute_router)
app.include_router(review_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(tax_router)
app.include_router(shipping_router)


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "storefront", "status": "running"}


@app.on_event("startup")
async def startup_event():
    # The schema is normally owned by the database deployment; this is for local runs.
    if CREATE_TABLES_ON_STARTUP:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
