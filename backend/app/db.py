"""
Configuração do banco de dados SQLAlchemy
"""

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool
from app.core.config import settings
from app.models.base import Base

# Importa modelos para garantir registro no metadata
from app.models import PedidoDB  # noqa: F401

logger = logging.getLogger(__name__)

# Configuração do engine para SQLite
connect_args = {}
poolclass = None

if "sqlite" in settings.database_url:
    # SQLite: configurações para evitar "database is locked"
    connect_args = {
        "check_same_thread": False,
        "timeout": 20.0  # Timeout de 20 segundos
    }
    # Usa NullPool para SQLite (evita pool de conexões que pode causar locks)
    poolclass = NullPool

    # Habilita WAL mode para melhor concorrência
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        """Habilita WAL mode e outras otimizações do SQLite"""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.close()

# Cria engine
engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    poolclass=poolclass,
    pool_pre_ping=True,  # Verifica conexão antes de usar
    echo=False
)

# Registra evento para SQLite
if "sqlite" in settings.database_url:
    event.listen(engine, "connect", _set_sqlite_pragma)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Cria todas as tabelas no banco de dados"""
    Base.metadata.create_all(bind=engine)
    logger.info("Banco de dados inicializado")


def get_db() -> Session:
    """
    Dependency para obter sessão do banco de dados.
    Usar com Depends(get_db) no FastAPI.

    Faz commit ao final do request e rollback em caso de erro.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Erro na sessão do banco: {e}", exc_info=True)
        raise
    finally:
        db.close()
