import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.exceptions import AppError, Unauthenticated, Unauthorized
from app.messages import ErrorMessages
from app.utils.security import decode_token

log = structlog.get_logger(__name__)

PROTECTED_PATHS = ["/products"]

def _get_token(request: Request) -> str:
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise Unauthenticated(ErrorMessages.UNAUTHENTICATED_USER)
    token = auth.split(" ", 1)[1].strip()
    if not token:
        raise Unauthenticated(ErrorMessages.UNAUTHENTICATED_USER)
    return token

def _reject(err: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=err.status_code or status.HTTP_401_UNAUTHORIZED,
        content={
            "success": False,
            "message": err.message or ErrorMessages.UNAUTHORIZED_ACCESS.value,
        },
    )

async def auth_middleware(request: Request, call_next):
    path = request.url.path

    # CORS preflight carries no credentials
    if request.method == "OPTIONS":
        return await call_next(request)

    if not any(path == p or path.startswith(p + "/") for p in PROTECTED_PATHS):
        return await call_next(request)

    try:
        request.state.user = decode_token(_get_token(request))
    except AppError as err:
        log.info("auth.rejected", path=path, status=err.status_code, reason=err.message)
        return _reject(err)
    except Exception:
        log.exception("auth.verify_failed", path=path)
        return _reject(Unauthorized(ErrorMessages.UNAUTHORIZED_ACCESS))

    structlog.contextvars.bind_contextvars(user_id=request.state.user.id)
    try:
        return await call_next(request)
    finally:
        structlog.contextvars.unbind_contextvars("user_id")
