
from sqlalchemy.orm import Session
from app.models.product import Product


class ProductRepository:
    """Data access over the products table. No business rules live here."""

    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self):
        return self.db.query(Product).order_by(Product.created_at.desc(), Product.id.desc())

    def find_all(self) -> list[Product]:
        return self._newest_first().all()

    def find_by_user(self, user_id: int) -> list[Product]:
        return self._newest_first().filter(Product.user_id == user_id).all()

    def find_one_by_criteria(self, exclude_id: int | None = None, **criteria) -> Product | None:
        q = self.db.query(Product).filter_by(**criteria)
        if exclude_id is not None:
            q = q.filter(Product.id != exclude_id)
        return q.first()

    def find_existing_by_name(self, id: int, name: str, user_id: int) -> Product | None:
        return self.find_one_by_criteria(exclude_id=id, name=name, user_id=user_id)

    def find_by_id(self, id: int) -> Product | None:
        return self.db.get(Product, id)

    def create(self, **fields) -> Product:
        product = Product(**fields)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_by_id(self, id: int, **fields) -> Product | None:
        product = self.db.get(Product, id)
        if product is None:
            return None
        for key, value in fields.items():
            setattr(product, key, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_by_id(self, id: int) -> Product | None:
        product = self.db.get(Product, id)
        if product is None:
            return None
        self.db.delete(product)
        self.db.commit()
        return product
