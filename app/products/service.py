"""
Product business rules.

Name uniqueness is scoped to the owning user and checked read-then-write;
two concurrent creates with the same name can both pass the check.
"""

import structlog

from app.exceptions import AlreadyExists, NotFound
from app.messages import ErrorMessages
from app.models.product import Product
from app.products.repository import ProductRepository
from app.schemas.product import ProductCreate, ProductOut, ProductUpdate

log = structlog.get_logger(__name__)


def to_dto(product: Product) -> ProductOut:
    return ProductOut.model_validate(product)


def index(repo: ProductRepository, user_id: int | None = None, scope: str = "all") -> list[ProductOut]:
    """
    Lists products newest first.

    With scope="all" the caller's id is ignored and every product is
    returned; scope="owner" restricts the listing to ``user_id``.
    """
    if scope == "owner" and user_id is not None:
        return my_products(repo, user_id)
    return [to_dto(p) for p in repo.find_all()]


def my_products(repo: ProductRepository, user_id: int) -> list[ProductOut]:
    return [to_dto(p) for p in repo.find_by_user(user_id)]


def create(repo: ProductRepository, payload: ProductCreate, user_id: int) -> ProductOut:
    if repo.find_one_by_criteria(name=payload.name, user_id=user_id):
        raise AlreadyExists(ErrorMessages.PRODUCT_ALREADY_EXISTS)

    product = repo.create(
        user_id=user_id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
    )
    log.info("product.created", product_id=product.id, user_id=user_id)
    return to_dto(product)


def update(repo: ProductRepository, id: int, payload: ProductUpdate, user_id: int) -> ProductOut:
    """
    Replaces name, description and price of a product owned by ``user_id``.

    The returned DTO echoes the payload values; only id and created_at
    come from the stored record.
    """
    if not repo.find_one_by_criteria(id=id, user_id=user_id):
        raise NotFound(ErrorMessages.PRODUCT_NOT_FOUND)

    if repo.find_existing_by_name(id, payload.name, user_id):
        raise AlreadyExists(ErrorMessages.PRODUCT_ALREADY_EXISTS)

    updated = repo.update_by_id(
        id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
    )
    log.info("product.updated", product_id=id, user_id=user_id)
    return ProductOut(
        id=updated.id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        created_at=updated.created_at,
    )


def show(repo: ProductRepository, id: int) -> ProductOut:
    product = repo.find_by_id(id)
    if not product:
        raise NotFound(ErrorMessages.PRODUCT_NOT_FOUND)
    return to_dto(product)


def destroy(repo: ProductRepository, id: int, user_id: int) -> None:
    if not repo.find_one_by_criteria(id=id, user_id=user_id):
        raise NotFound(ErrorMessages.PRODUCT_NOT_FOUND)
    repo.delete_by_id(id)
    log.info("product.deleted", product_id=id, user_id=user_id)
