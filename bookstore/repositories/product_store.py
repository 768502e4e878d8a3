from typing import Protocol

from sqlmodel import Session, func, select

from bookstore.models.product import Product
from bookstore.models.product_category import ProductCategory
from bookstore.schemas.pagination import Page, PageRequest


class ProductStore(Protocol):
    """Acceso de solo lectura a los productos."""

    def find_page_by_category(
        self, category: ProductCategory, page_request: PageRequest
    ) -> Page[Product]: ...


class SqlProductStore:
    def __init__(self, db: Session):
        self.db = db

    def find_page_by_category(
        self, category: ProductCategory, page_request: PageRequest
    ) -> Page[Product]:
        statement = select(Product).where(Product.category_id == category.id)

        # Ordenado por id para que las páginas sean estables
        products = self.db.exec(
            statement.order_by(Product.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        ).all()

        # Conteo total SIN paginar
        total_records = (
            self.db.exec(select(func.count()).select_from(statement.subquery())).first()
            or 0
        )

        return Page[Product].of(list(products), page_request, total_records)
