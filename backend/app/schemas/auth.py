# backend/app/schemas/auth.py
from typing import Optional

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Either email or phone must be present; the endpoint checks which."""
    email: Optional[str] = None
    phone: Optional[str] = None
    password: str
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    referred_code: Optional[str] = None


class SignUpResponse(BaseModel):
    user_id: str
    referral_code: str
    referred_by: Optional[str] = None
    message: str


class SignInRequest(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    password: str = ""


class SignInResponse(BaseModel):
    user_id: str
    access_token: str
    token_type: str = "bearer"
    message: str
