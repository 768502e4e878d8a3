from dotenv import (
    load_dotenv,
)  # Para cargar variables de entorno desde un archivo .env.
import os  # Para acceder a variables de entorno.
from typing import List, Optional

load_dotenv()


def get_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Env var {name} is required but not found.")
    return value


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    return value if value else default


def get_bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if not value:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_list_env(name: str, default: List[str]) -> List[str]:
    """Lee una variable separada por comas, ignorando elementos vacíos."""
    value = os.getenv(name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]
