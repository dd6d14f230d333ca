
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config import settings
from app.db.session import get_db
from app.messages import SuccessMessages
from app.schemas.auth import RegisterIn, LoginIn, TokenOut, UserOut
from app.auth.service import register_user, login_user

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    user = register_user(db, body)
    return {
        "success": True,
        "message": SuccessMessages.REGISTRATION_SUCCESSFUL.value,
        "data": UserOut.model_validate(user).model_dump(mode="json"),
    }

@router.post("/login")
def login(body: LoginIn, db: Session = Depends(get_db)):
    token = login_user(db, body.email, body.password)
    out = TokenOut(access_token=token, expires_in=settings.access_token_expire_minutes * 60)
    return {
        "success": True,
        "message": SuccessMessages.LOGIN_SUCCESSFUL.value,
        "data": out.model_dump(),
    }
