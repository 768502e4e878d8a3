from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ProductResponse(BaseModel):
    """
    Esquema para respuestas de la API.
    - `category_id` identifica la única categoría a la que pertenece el producto.
    """

    id: int
    sku: str
    name: str
    description: Optional[str] = None
    price: Decimal
    category_id: int

    # Permite convertir SQLModel en JSON automáticamente
    model_config = ConfigDict(from_attributes=True)
