
import structlog
from sqlalchemy.orm import Session
from app.exceptions import AlreadyExists, BadRequest, NotFound
from app.messages import ErrorMessages
from app.models.user import User
from app.schemas.auth import RegisterIn
from app.utils.security import hash_password, verify_password, create_access_token

log = structlog.get_logger(__name__)

def register_user(db: Session, body: RegisterIn) -> User:
    if db.query(User).filter(User.email == body.email).first():
        raise AlreadyExists(ErrorMessages.USER_ALREADY_EXISTS)
    user = User(
        firstname=body.firstname,
        lastname=body.lastname,
        email=body.email,
        password_hash=hash_password(body.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("auth.registered", user_id=user.id)
    return user

def login_user(db: Session, email: str, password: str) -> str:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFound(ErrorMessages.USER_NOT_FOUND)
    if not verify_password(password, user.password_hash):
        log.info("auth.login_failed", user_id=user.id)
        raise BadRequest(ErrorMessages.INCORRECT_LOGIN_CREDENTIALS)
    log.info("auth.logged_in", user_id=user.id)
    return create_access_token(user)
