
import re
from datetime import datetime

from email_validator import validate_email, EmailNotValidError
from pydantic import BaseModel, EmailStr, field_validator, model_validator

from app.messages import ErrorMessages

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8

def is_strong_password(password: str) -> bool:
    return (
        len(password) >= PASSWORD_MIN_LENGTH
        and re.search(r"[a-z]", password) is not None
        and re.search(r"[A-Z]", password) is not None
        and re.search(r"\d", password) is not None
        and re.search(r"[^A-Za-z0-9]", password) is not None
    )

class RegisterIn(BaseModel):
    firstname: str
    lastname: str
    email: str
    password: str
    password_confirmation: str

    @field_validator("firstname")
    @classmethod
    def firstname_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < NAME_MIN_LENGTH:
            raise ValueError(ErrorMessages.FIRSTNAME_MIN_LENGTH_ERROR.value)
        return v

    @field_validator("lastname")
    @classmethod
    def lastname_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < NAME_MIN_LENGTH:
            raise ValueError(ErrorMessages.LASTNAME_MIN_LENGTH_ERROR.value)
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        try:
            return validate_email(v.strip(), check_deliverability=False).normalized
        except EmailNotValidError:
            raise ValueError(ErrorMessages.INVALID_EMAIL_SUPPLIED.value)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if not is_strong_password(v):
            raise ValueError(ErrorMessages.PASSWORD_STRENGTH_ERROR.value)
        return v

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.password_confirmation:
            raise ValueError(ErrorMessages.PASSWORDS_DO_NOT_MATCH.value)
        return self

class LoginIn(BaseModel):
    email: EmailStr
    password: str

class UserOut(BaseModel):
    id: int
    firstname: str
    lastname: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int

class TokenIdentity(BaseModel):
    """Identity carried by a verified bearer token."""
    id: int
    email: str
