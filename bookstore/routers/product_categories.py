from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, status

from bookstore.dependencies import get_category_store, get_pagination, get_product_store
from bookstore.exceptions import EntityNotFoundError
from bookstore.models.product_category import ProductCategory
from bookstore.repositories.category_store import CategoryStore
from bookstore.repositories.product_store import ProductStore
from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.pagination import Page, PageRequest, PaginationRequest
from bookstore.schemas.product import ProductResponse
from bookstore.schemas.product_category import CategoryResponse

router = APIRouter(
    prefix="/api/v1/product-categories",
    tags=["Product category"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Bad request"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal error",
        },
    },
)

NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Entity not found"}
}

# Los ids se guardan en columnas BIGINT
CategoryId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def existing_category(store: CategoryStore, id: int) -> ProductCategory:
    """Devuelve la categoría o lanza EntityNotFoundError si no existe."""
    category = store.find_by_id(id)
    if category is None:
        raise EntityNotFoundError(f"Category with id = {id} could not be found.")
    return category


@router.get(
    "/{id}",
    response_model=CategoryResponse,
    responses=NOT_FOUND_RESPONSE,
    description="Retrieve product category by id.",
)
def get_category(id: CategoryId, categories: CategoryStore = Depends(get_category_store)):
    return existing_category(categories, id)


@router.get("/", include_in_schema=False, response_model=List[CategoryResponse])
@router.get(
    "",
    response_model=List[CategoryResponse],
    description="Retrieve categories list.",
)
def list_categories(categories: CategoryStore = Depends(get_category_store)):
    return categories.find_all()


@router.get(
    "/{id}/products",
    response_model=Page[ProductResponse],
    responses=NOT_FOUND_RESPONSE,
    description="Retrieve products in specified category.",
)
def list_products_by_category(
    id: CategoryId,
    pagination: PaginationRequest = Depends(get_pagination),
    categories: CategoryStore = Depends(get_category_store),
    products: ProductStore = Depends(get_product_store),
):
    category = existing_category(categories, id)
    page_request = PageRequest.of(pagination.page, pagination.size)
    return products.find_page_by_category(category, page_request)
