from .jwt_handler import create_access_token, verify_access_token, expires_in_label, TOKEN_TYPE
from .passwords import hash_password, verify_password
from .dependencies import get_current_customer
from .rate_limiter import limiter, customer_id_or_ip, LOGIN_RATE_LIMIT

__all__ = [
    "create_access_token",
    "verify_access_token",
    "expires_in_label",
    "TOKEN_TYPE",
    "hash_password",
    "verify_password",
    "get_current_customer",
    "limiter",
    "customer_id_or_ip",
    "LOGIN_RATE_LIMIT",
]
