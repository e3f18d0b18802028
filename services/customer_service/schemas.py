import re
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.config.database import MAX_INTEGER

_CARD_SEPARATORS = re.compile(r"[\s-]+")


def mask_credit_card(number: Optional[str]) -> Optional[str]:
    """Keeps only the last four digits visible: XXXXXXXXXXXX1234."""
    if not number:
        return None
    return "X" * max(len(number) - 4, 0) + number[-4:]


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)


class CustomerLogin(BaseModel):
    email: EmailStr
    password: str


class CustomerUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: Optional[str] = Field(default=None, min_length=6, max_length=72)
    day_phone: Optional[str] = None
    eve_phone: Optional[str] = None
    mob_phone: Optional[str] = None


class AddressUpdate(BaseModel):
    address_1: str = Field(min_length=1, max_length=100)
    address_2: Optional[str] = None
    city: str = Field(min_length=1, max_length=100)
    region: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    shipping_region_id: int = Field(ge=1, le=MAX_INTEGER)


class CreditCardUpdate(BaseModel):
    credit_card: str

    @field_validator("credit_card")
    @classmethod
    def normalise_card_number(cls, value: str) -> str:
        digits = _CARD_SEPARATORS.sub("", value)
        if not digits.isdigit() or not 12 <= len(digits) <= 19:
            raise ValueError("credit card number must be 12 to 19 digits")
        return digits


class CustomerProfile(BaseModel):
    customer_id: int
    name: str
    email: str
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    shipping_region_id: Optional[int] = None
    credit_card: Optional[str] = None
    day_phone: Optional[str] = None
    eve_phone: Optional[str] = None
    mob_phone: Optional[str] = None

    @field_validator("credit_card", mode="before")
    @classmethod
    def mask_card(cls, value: Optional[str]) -> Optional[str]:
        return mask_credit_card(value)

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    customer: CustomerProfile
    accessToken: str
    expires_in: str
