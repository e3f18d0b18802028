from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_checkout_total = Counter(
    "ecomm_checkout_total",
    "Total checkouts processed",
    ["status"] # Labels: 'success', 'failed'
)

ecomm_checkout_duration_seconds = Histogram(
    "ecomm_checkout_duration_seconds",
    "Checkout duration in seconds"
)

ecomm_cart_items_added_total = Counter(
    "ecomm_cart_items_added_total",
    "Total add-to-cart requests that wrote a cart line"
)

ecomm_customer_registrations_total = Counter(
    "ecomm_customer_registrations_total",
    "Total customer accounts created"
)

ecomm_login_attempts_total = Counter(
    "ecomm_login_attempts_total",
    "Total login attempts",
    ["status"] # Labels: 'success', 'failed'
)
