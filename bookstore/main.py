import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from bookstore.exceptions import register_exception_handlers
from bookstore.models.database import create_db_and_tables
from bookstore.routers import product_categories
from bookstore.utils.getenv import get_env, get_list_env
from fastapi.middleware.cors import CORSMiddleware  # CORS

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    level = get_env("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logger.info(f"Logging configured at {level} level")


# Crear la base de datos y las tablas al iniciar la aplicación
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting bookstore API")
    create_db_and_tables()
    yield
    logger.info("Bookstore API shutdown complete")


app = FastAPI(
    title="Bookstore API",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Product category",
            "description": "API for product categories management.",
        }
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_list_env("CORS_ORIGINS", ["http://localhost:5173"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Incluir routers
app.include_router(product_categories.router)
