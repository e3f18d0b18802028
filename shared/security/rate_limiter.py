import os
from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
from .jwt_handler import verify_access_token

RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
LOGIN_RATE_LIMIT = os.getenv("LOGIN_RATE_LIMIT", "10/minute")

def customer_id_or_ip(request: Request) -> str:
    """
    Key function for SlowAPI.
    Extracts the customer ID directly from the Authorization header if available.
    Falls back to the client's IP address if unauthenticated.
    """
    auth_header = request.headers.get("Authorization")

    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1]
        payload = verify_access_token(token)
        if payload and "sub" in payload:
            return f"customer:{payload['sub']}"

    return f"ip:{get_remote_address(request)}"

limiter = Limiter(key_func=customer_id_or_ip, enabled=RATE_LIMIT_ENABLED)
