from core.domain.models.categoria import Categoria
from core.domain.ports.categoria_repository import CategoriaRepository
from infrastructure.peewee.model.models import CategoriaModel


class PeeweeCategoriaRepository(CategoriaRepository):
    def listar(self) -> list[Categoria]:
        return [
            Categoria(id=c.id, descricao=c.descricao)
            for c in CategoriaModel.select().order_by(CategoriaModel.id)
        ]

    def existe(self, id_categoria: int) -> bool:
        return CategoriaModel.select().where(CategoriaModel.id == id_categoria).exists()
