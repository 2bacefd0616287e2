from typing import Any

from pymongo.collection import Collection

from core.domain.models.categoria import CATEGORIAS_PADRAO, Categoria
from core.domain.ports.categoria_repository import CategoriaRepository
from infrastructure.mongo.session.client import get_db


class MongoCategoriaRepository(CategoriaRepository):
    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.categorias

    def garantir_padroes(self) -> None:
        """Cria as categorias padrão que ainda não existirem."""
        for id_categoria, descricao in enumerate(CATEGORIAS_PADRAO, start=1):
            self.collection.update_one(
                {"_id": id_categoria},
                {"$setOnInsert": {"descricao": descricao}},
                upsert=True,
            )

    def listar(self) -> list[Categoria]:
        docs = self.collection.find().sort("_id", 1)
        return [Categoria(id=doc["_id"], descricao=doc["descricao"]) for doc in docs]

    def existe(self, id_categoria: int) -> bool:
        return self.collection.count_documents({"_id": id_categoria}, limit=1) > 0
