import pytest

from app.exceptions import AlreadyExists, NotFound
from app.models.product import Product
from app.models.user import User
from app.products import service
from app.products.repository import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate


@pytest.fixture
def users(db_session):
    owners = [
        User(firstname="John", lastname="Doe", email="john@example.com", password_hash="x"),
        User(firstname="Jane", lastname="Doe", email="jane@example.com", password_hash="x"),
    ]
    db_session.add_all(owners)
    db_session.commit()
    return owners


@pytest.fixture
def repo(db_session):
    return ProductRepository(db_session)


def test_find_one_by_criteria_excludes_id(repo, users):
    lamp = repo.create(user_id=users[0].id, name="Lamp", price=10)
    assert repo.find_one_by_criteria(name="Lamp", user_id=users[0].id).id == lamp.id
    assert repo.find_one_by_criteria(exclude_id=lamp.id, name="Lamp", user_id=users[0].id) is None
    assert repo.find_existing_by_name(lamp.id, "Lamp", users[0].id) is None


def test_update_and_delete_missing_ids(repo):
    assert repo.update_by_id(404, name="Nothing") is None
    assert repo.delete_by_id(404) is None


def test_index_ignores_user_unless_owner_scope(repo, users):
    service.create(repo, ProductCreate(name="A", price=1), users[0].id)
    service.create(repo, ProductCreate(name="B", price=2), users[1].id)

    assert [p.name for p in service.index(repo, users[0].id)] == ["B", "A"]
    assert [p.name for p in service.index(repo, users[0].id, scope="owner")] == ["A"]


def test_create_conflict(repo, users):
    service.create(repo, ProductCreate(name="A", price=1), users[0].id)
    with pytest.raises(AlreadyExists) as exc:
        service.create(repo, ProductCreate(name="A", price=3), users[0].id)
    assert exc.value.status_code == 409


def test_update_returns_payload_values(repo, users):
    created = service.create(repo, ProductCreate(name="A", description="old", price=1), users[0].id)
    out = service.update(repo, created.id, ProductUpdate(name="B", description="new", price=5), users[0].id)
    assert (out.id, out.name, out.description, out.price) == (created.id, "B", "new", 5)
    assert out.created_at == created.created_at
    assert repo.find_by_id(created.id).name == "B"


def test_update_missing_for_owner(repo, users):
    created = service.create(repo, ProductCreate(name="A", price=1), users[1].id)
    with pytest.raises(NotFound):
        service.update(repo, created.id, ProductUpdate(name="B", price=1), users[0].id)


def test_destroy_requires_ownership(repo, users, db_session):
    created = service.create(repo, ProductCreate(name="A", price=1), users[1].id)
    with pytest.raises(NotFound):
        service.destroy(repo, created.id, users[0].id)
    assert db_session.get(Product, created.id) is not None

    service.destroy(repo, created.id, users[1].id)
    assert db_session.get(Product, created.id) is None


def test_show_missing(repo):
    with pytest.raises(NotFound):
        service.show(repo, 1)
