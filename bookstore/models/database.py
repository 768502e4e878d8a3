import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, event, text
from sqlmodel import SQLModel, create_engine, Session

from bookstore.exceptions import ReadOnlyTransactionError
from bookstore.utils.getenv import get_bool_env, get_required_env

logger = logging.getLogger(__name__)

# Conectar a la base de datos existente
DATABASE_URL = get_required_env("DATABASE_URL")

engine = create_engine(DATABASE_URL, echo=get_bool_env("DATABASE_ECHO"))


def _reject_writes(session, flush_context, instances):
    if session.new or session.dirty or session.deleted:
        raise ReadOnlyTransactionError(
            "Cannot flush changes inside a read-only transaction."
        )


@contextmanager
def read_only_session(bind: Engine) -> Generator[Session, None, None]:
    """Abre una sesión de solo lectura.

    Cualquier flush con cambios pendientes falla, y la transacción se
    deshace siempre al salir, tanto si la petición termina bien como si
    lanza una excepción.
    """
    with Session(bind, autoflush=False) as session:
        event.listen(session, "before_flush", _reject_writes)
        if bind.dialect.name == "postgresql":
            session.execute(text("SET TRANSACTION READ ONLY"))
        try:
            yield session
        finally:
            session.rollback()


def get_read_only_db():
    """Obtiene una sesión de solo lectura para los endpoints de consulta."""
    with read_only_session(engine) as session:
        yield session


def create_db_and_tables():
    # Los modelos deben estar importados para registrar sus tablas
    from bookstore.models import product, product_category  # noqa: F401

    logger.info(
        f"Connecting to database: {engine.url.render_as_string(hide_password=True)}"
    )
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created/verified")
