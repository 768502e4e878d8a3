from dataclasses import dataclass
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


# Límite de un int de 32 bits: page * size siempre cabe en un BIGINT
MAX_PAGINATION_VALUE = 2**31 - 1


class PaginationRequest(BaseModel):
    """
    Parámetros de paginación recibidos por query.
    - `page`: índice de página, empieza en 0.
    - `size`: número máximo de elementos por página.
    """

    page: int = Field(
        0, ge=0, le=MAX_PAGINATION_VALUE, description="Page index, 0-indexed"
    )
    size: int = Field(
        DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGINATION_VALUE, description="Page size"
    )


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        return cls(page=page, size=size)


class Page(BaseModel, Generic[T]):
    """Una página de resultados más los totales de la consulta completa."""

    content: List[T]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    @classmethod
    def of(cls, content: List[T], request: PageRequest, total: int) -> "Page[T]":
        total_pages = (total + request.size - 1) // request.size
        return cls(
            content=content,
            number=request.page,
            size=request.size,
            total_elements=total,
            total_pages=total_pages,
            number_of_elements=len(content),
            first=request.page == 0,
            last=request.page + 1 >= total_pages,
            empty=not content,
        )
