from fastapi import Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordBearer
from .jwt_handler import verify_access_token

# Defines the expected header format (Bearer <token>)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="customers/login", auto_error=False)

async def get_current_customer(request: Request, token: str = Depends(oauth2_scheme)) -> int:
    """Dependency to validate the bearer JWT and return the customer id (sub)."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    payload = verify_access_token(token)
    if payload is None:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise credentials_exception

    customer_id = int(subject)
    # Store in request state for downstream use (like rate limiting)
    request.state.customer_id = customer_id
    return customer_id
