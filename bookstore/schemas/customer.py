"""
Customer Pydantic Schemas

The create schema takes a plain password; responses never expose the
stored hash.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CustomerBase(BaseModel):
    """Shared customer fields."""

    first_name: str = Field(..., min_length=1, max_length=50, examples=["John"])
    last_name: str = Field(..., min_length=1, max_length=50, examples=["Smith"])
    email: EmailStr = Field(..., examples=["john.smith@example.com"])
    phone: str | None = Field(default=None, max_length=20)
    address_line1: str | None = Field(default=None, max_length=100)
    address_line2: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=50)
    postal_code: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, max_length=50)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are stored lower-cased so uniqueness is case-insensitive."""
        return v.lower()


class CustomerCreate(CustomerBase):
    """Schema for registering a customer."""

    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Plain password, hashed before storage",
    )


class CustomerUpdate(BaseModel):
    """Partial customer update. Email changes are checked for uniqueness."""

    first_name: str | None = Field(default=None, min_length=1, max_length=50)
    last_name: str | None = Field(default=None, min_length=1, max_length=50)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)
    address_line1: str | None = Field(default=None, max_length=100)
    address_line2: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=50)
    postal_code: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, max_length=50)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return v.lower() if v is not None else v


class CustomerResponse(CustomerBase):
    """Customer as returned to callers (no credential hash)."""

    id: int
    registration_date: datetime
    last_login: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CustomerLogin(BaseModel):
    """Credentials checked by the login endpoint."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
