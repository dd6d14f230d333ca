
import secrets
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext
from jose import jwt, JWTError
from pydantic import ValidationError

from app.config import settings
from app.exceptions import InvalidToken
from app.messages import ErrorMessages
from app.schemas.auth import TokenIdentity

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)

def create_access_token(user, expires_minutes: int | None = None) -> str:
    """Signs a token carrying the user's id and email."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or settings.access_token_expire_minutes)
    to_encode = {"id": user.id, "email": user.email, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)

def decode_token(token: str) -> TokenIdentity:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
        return TokenIdentity(id=payload.get("id"), email=payload.get("email"))
    except (JWTError, ValidationError):
        raise InvalidToken(ErrorMessages.INVALID_TOKEN)

def random_token_string() -> str:
    return secrets.token_hex(40)
