
from fastapi import Request
from app.exceptions import Unauthenticated
from app.messages import ErrorMessages
from app.schemas.auth import TokenIdentity


def get_current_identity(request: Request) -> TokenIdentity:
    identity = getattr(request.state, "user", None)
    if identity is None:
        raise Unauthenticated(ErrorMessages.UNAUTHENTICATED_USER)
    return identity
