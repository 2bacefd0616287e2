from core.domain.models.categoria import Categoria
from core.domain.ports.categoria_repository import CategoriaRepository
from infrastructure.sqlalchemy.session.db import get_session
from infrastructure.sqlalchemy.model.models import CategoriaModel


class SqlAlchemyCategoriaRepository(CategoriaRepository):
    def listar(self) -> list[Categoria]:
        session = get_session()
        try:
            return [
                Categoria(id=c.id, descricao=c.descricao)
                for c in session.query(CategoriaModel).order_by(CategoriaModel.id)
            ]
        finally:
            session.close()

    def existe(self, id_categoria: int) -> bool:
        session = get_session()
        try:
            return session.get(CategoriaModel, id_categoria) is not None
        finally:
            session.close()
