from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    __tablename__ = "product"

    id: int = Field(default=None, primary_key=True, nullable=False)
    sku: str = Field(unique=True, index=True, nullable=False)
    name: str = Field(nullable=False)
    description: Optional[str] = Field(default=None)
    price: Decimal = Field(default=0, max_digits=10, decimal_places=2, nullable=False)
    category_id: int = Field(
        foreign_key="product_category.id", index=True, nullable=False
    )
