from typing import Annotated

from fastapi import Depends, Query
from sqlmodel import Session

from bookstore.models.database import get_read_only_db
from bookstore.repositories.category_store import CategoryStore, SqlCategoryStore
from bookstore.repositories.product_store import ProductStore, SqlProductStore
from bookstore.schemas.pagination import PaginationRequest


def get_category_store(db: Session = Depends(get_read_only_db)) -> CategoryStore:
    return SqlCategoryStore(db)


def get_product_store(db: Session = Depends(get_read_only_db)) -> ProductStore:
    return SqlProductStore(db)


def get_pagination(
    pagination: Annotated[PaginationRequest, Query()],
) -> PaginationRequest:
    """Parámetros de paginación validados antes de ejecutar el endpoint."""
    return pagination
