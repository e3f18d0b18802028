from .setup import setup_observability
from .metrics import (
    ecomm_checkout_total,
    ecomm_checkout_duration_seconds,
    ecomm_cart_items_added_total,
    ecomm_customer_registrations_total,
    ecomm_login_attempts_total,
)
