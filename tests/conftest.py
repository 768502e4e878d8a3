import os

# La configuración se lee al importar bookstore.models.database
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from bookstore.dependencies import get_category_store, get_product_store
from bookstore.main import app
from bookstore.models.database import get_read_only_db, read_only_session
from bookstore.models.product import Product
from bookstore.models.product_category import ProductCategory
from bookstore.schemas.pagination import Page


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def categories():
    return [
        ProductCategory(id=1, name="Fiction"),
        ProductCategory(id=2, name="Poetry"),
        ProductCategory(id=3, name="History"),
    ]


@pytest.fixture
def products():
    return [
        Product(id=1, sku="FIC001", name="Dune", price=Decimal("12.50"), category_id=1),
        Product(id=2, sku="FIC002", name="Solaris", price=Decimal("9.99"), category_id=1),
        Product(id=3, sku="FIC003", name="Ubik", price=Decimal("8.00"), category_id=1),
        Product(id=4, sku="POE001", name="Leaves of Grass", price=Decimal("15.00"), category_id=2),
    ]


@pytest.fixture
def seeded_engine(engine, categories, products):
    with Session(engine) as session:
        session.add_all(categories)
        session.commit()
        session.add_all(products)
        session.commit()
    return engine


@pytest.fixture
def client(seeded_engine):
    """Cliente contra una base SQLite en memoria con datos de ejemplo."""

    def override_get_read_only_db():
        with read_only_session(seeded_engine) as session:
            yield session

    app.dependency_overrides[get_read_only_db] = override_get_read_only_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class RecordingCategoryStore:
    def __init__(self, categories):
        self.categories = {category.id: category for category in categories}
        self.calls = []

    def find_by_id(self, id):
        self.calls.append(("find_by_id", id))
        return self.categories.get(id)

    def find_all(self):
        self.calls.append(("find_all",))
        return list(self.categories.values())


class RecordingProductStore:
    def __init__(self, products):
        self.products = products
        self.calls = []

    def find_page_by_category(self, category, page_request):
        self.calls.append(("find_page_by_category", category.id, page_request))
        matching = [p for p in self.products if p.category_id == category.id]
        start = page_request.offset
        window = matching[start : start + page_request.size]
        return Page[Product].of(window, page_request, len(matching))


@pytest.fixture
def category_store(categories):
    return RecordingCategoryStore(categories)


@pytest.fixture
def product_store(products):
    return RecordingProductStore(products)


@pytest.fixture
def recording_client(category_store, product_store):
    """Cliente con stores en memoria que registran cada llamada."""
    app.dependency_overrides[get_category_store] = lambda: category_store
    app.dependency_overrides[get_product_store] = lambda: product_store
    yield TestClient(app)
    app.dependency_overrides.clear()
