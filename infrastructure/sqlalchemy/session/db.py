import os

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.domain.models.categoria import CATEGORIAS_PADRAO

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///test.db")

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


def get_session():
    return SessionLocal()


def init_db() -> None:
    # Imported here so the models register themselves on Base first.
    from infrastructure.sqlalchemy.model.models import CategoriaModel

    Base.metadata.create_all(bind=engine)
    session = get_session()
    try:
        if session.query(CategoriaModel).first() is None:
            session.add_all(
                [CategoriaModel(descricao=descricao) for descricao in CATEGORIAS_PADRAO]
            )
            session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
