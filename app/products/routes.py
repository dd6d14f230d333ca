
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.auth.deps import get_current_identity
from app.config import settings
from app.db.session import get_db
from app.exceptions import AppError
from app.messages import SuccessMessages
from app.products import service
from app.products.repository import ProductRepository
from app.schemas.auth import TokenIdentity
from app.schemas.product import ProductCreate, ProductOut, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])

def get_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)

def _ok(data, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    if isinstance(data, ProductOut):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [p.model_dump(mode="json", by_alias=True) for p in data]
    return JSONResponse(status_code=status_code, content={"success": True, "data": data})

def _fail(err: AppError, status_code: int | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code or err.status_code or status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": err.message},
    )

def _collapsed_status() -> int | None:
    # list/create answer 400 for every failure unless forwarding is enabled
    return None if settings.forward_error_status else status.HTTP_400_BAD_REQUEST

@router.get("")
def all_products(repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        return _ok(service.index(repo, user.id, scope=settings.product_list_scope))
    except AppError as err:
        return _fail(err, _collapsed_status())

@router.post("", status_code=status.HTTP_201_CREATED)
def store(body: ProductCreate, repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        return _ok(service.create(repo, body, user.id), status.HTTP_201_CREATED)
    except AppError as err:
        return _fail(err, _collapsed_status())

@router.get("/mine")
def my_products(repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        return _ok(service.my_products(repo, user.id))
    except AppError as err:
        return _fail(err)

@router.get("/{product_id}")
def show(product_id: int, repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        return _ok(service.show(repo, product_id))
    except AppError as err:
        return _fail(err)

@router.put("/{product_id}")
def update(product_id: int, body: ProductUpdate, repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        return _ok(service.update(repo, product_id, body, user.id))
    except AppError as err:
        return _fail(err)

@router.delete("/{product_id}")
def destroy(product_id: int, repo: ProductRepository = Depends(get_repository), user: TokenIdentity = Depends(get_current_identity)):
    try:
        service.destroy(repo, product_id, user.id)
    except AppError as err:
        return _fail(err)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "data": None, "message": SuccessMessages.PRODUCT_DELETED.value},
    )
