
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.middleware.auth import auth_middleware
from app.config import settings
from app.db.session import init_db
from app.exceptions import AppError, ValidationFailed
from app.logging_config import configure_logging
from app.auth.routes import router as auth_router
from app.products.routes import router as products_router


def validation_message(exc: RequestValidationError) -> str:
    """First failing rule, using the validator's own message when it raised one."""
    errors = exc.errors()
    if not errors:
        return "Invalid request payload"
    first = errors[0]
    ctx_error = (first.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    field = ".".join(str(p) for p in first.get("loc", ())[1:])
    return f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request payload")


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code or 400,
        content={"success": False, "message": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return await app_error_handler(request, ValidationFailed(validation_message(exc)))


def create_app() -> FastAPI:
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(auth_middleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(auth_router)
    app.include_router(products_router)

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
