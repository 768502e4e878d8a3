from typing import List, Optional, Protocol

from sqlmodel import Session, select

from bookstore.models.product_category import ProductCategory


class CategoryStore(Protocol):
    """Acceso de solo lectura a las categorías de producto."""

    def find_by_id(self, id: int) -> Optional[ProductCategory]: ...

    def find_all(self) -> List[ProductCategory]: ...


class SqlCategoryStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, id: int) -> Optional[ProductCategory]:
        return self.db.get(ProductCategory, id)

    def find_all(self) -> List[ProductCategory]:
        # Sin orden explícito: se devuelve el orden de la base de datos
        return list(self.db.exec(select(ProductCategory)).all())
