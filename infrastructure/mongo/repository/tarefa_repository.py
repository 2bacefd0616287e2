import logging
import re
from datetime import datetime
from typing import Any

from pymongo import ReturnDocument
from pymongo.collection import Collection

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.mongo.models.tarefa import TarefaMongo
from infrastructure.mongo.session.client import get_db
from infrastructure.utc import para_banco

logger = logging.getLogger(__name__)


class MongoTarefaRepository(TarefaRepository):
    """
    Implementação de TarefaRepository usando MongoDB (síncrono).

    Os ids são inteiros sequenciais mantidos na coleção `contadores`.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tarefas
        self.contadores: Collection[Any] = self.db.contadores

    def _proximo_id(self) -> int:
        contador = self.contadores.find_one_and_update(
            {"_id": "tarefas"},
            {"$inc": {"valor": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return contador["valor"]

    def cadastrar(self, tarefa: Tarefa) -> int:
        """
        Insere uma nova tarefa.

        Retorna:
            int: O id atribuído à tarefa.
        """
        id_tarefa = self._proximo_id()
        documento = TarefaMongo.from_domain(tarefa, id_tarefa).model_dump(by_alias=True)
        self.collection.insert_one(documento)
        tarefa.id = id_tarefa
        logger.debug(f"Tarefa {id_tarefa} inserida no MongoDB")
        return id_tarefa

    def listar(self, id_usuario: int, termo: str | None = None) -> list[Tarefa]:
        """
        Lista as tarefas do usuário, opcionalmente filtradas por trecho da
        descrição (sem diferenciar maiúsculas de minúsculas).
        """
        filtro: dict[str, Any] = {"id_usuario": id_usuario}
        if termo:
            filtro["descricao"] = {"$regex": re.escape(termo), "$options": "i"}
        docs = self.collection.find(filtro).sort("_id", 1)
        return [TarefaMongo(**doc).to_domain() for doc in docs]

    def obter(self, id_usuario: int, id_tarefa: int) -> Tarefa | None:
        doc = self.collection.find_one({"_id": id_tarefa, "id_usuario": id_usuario})
        if not doc:
            return None
        return TarefaMongo(**doc).to_domain()

    def alterar(
        self, id_usuario: int, id_tarefa: int, alteracoes: dict[str, Any]
    ) -> bool:
        result = self.collection.update_one(
            {"_id": id_tarefa, "id_usuario": id_usuario}, {"$set": alteracoes}
        )
        return result.matched_count > 0

    def definir_conclusao(
        self, id_usuario: int, id_tarefa: int, data_conclusao: datetime | None
    ) -> bool:
        filtro: dict[str, Any] = {"_id": id_tarefa, "id_usuario": id_usuario}
        # Concluir exige tarefa aberta; reabrir exige tarefa concluída.
        if data_conclusao is not None:
            filtro["data_conclusao"] = None
        else:
            filtro["data_conclusao"] = {"$ne": None}
        result = self.collection.update_one(
            filtro, {"$set": {"data_conclusao": para_banco(data_conclusao)}}
        )
        return result.modified_count > 0

    def excluir(self, id_usuario: int, id_tarefa: int) -> bool:
        result = self.collection.delete_one({"_id": id_tarefa, "id_usuario": id_usuario})
        return result.deleted_count > 0
