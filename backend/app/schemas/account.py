# backend/app/schemas/account.py
from pydantic import BaseModel


class ChangeEmailRequest(BaseModel):
    new_email: str


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str
    confirm_password: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str
