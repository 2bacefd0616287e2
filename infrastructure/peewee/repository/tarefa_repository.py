import logging
from datetime import datetime
from typing import Any, List

from peewee import fn

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.peewee.model.models import TarefaModel
from infrastructure.utc import do_banco, para_banco

logger = logging.getLogger(__name__)


def _to_domain(t: TarefaModel) -> Tarefa:
    return Tarefa(
        id=t.id,
        descricao=t.descricao,
        id_categoria=t.id_categoria,
        id_usuario=t.id_usuario,
        data_conclusao=do_banco(t.data_conclusao),
    )


class PeeweeTarefaRepository(TarefaRepository):
    """Tabelas criadas por `init_db` na inicialização da aplicação."""

    def _do_usuario(self, id_usuario: int, id_tarefa: int):
        return (TarefaModel.id == id_tarefa) & (TarefaModel.id_usuario == id_usuario)

    def cadastrar(self, tarefa: Tarefa) -> int:
        model = TarefaModel.create(
            descricao=tarefa.descricao,
            id_categoria=tarefa.id_categoria,
            id_usuario=tarefa.id_usuario,
            data_conclusao=para_banco(tarefa.data_conclusao),
        )
        tarefa.id = model.id
        logger.debug(f"Tarefa {model.id} inserida")
        return model.id

    def listar(self, id_usuario: int, termo: str | None = None) -> List[Tarefa]:
        query = TarefaModel.select().where(TarefaModel.id_usuario == id_usuario)
        if termo:
            query = query.where(
                fn.LOWER(TarefaModel.descricao).contains(termo.lower())
            )
        return [_to_domain(t) for t in query.order_by(TarefaModel.id)]

    def obter(self, id_usuario: int, id_tarefa: int) -> Tarefa | None:
        t = TarefaModel.get_or_none(self._do_usuario(id_usuario, id_tarefa))
        return _to_domain(t) if t is not None else None

    def alterar(
        self, id_usuario: int, id_tarefa: int, alteracoes: dict[str, Any]
    ) -> bool:
        query = TarefaModel.update(**alteracoes).where(
            self._do_usuario(id_usuario, id_tarefa)
        )
        if query.execute() > 0:
            return True
        # MySQL conta linhas alteradas, não encontradas: valores iguais dão 0.
        return self.obter(id_usuario, id_tarefa) is not None

    def definir_conclusao(
        self, id_usuario: int, id_tarefa: int, data_conclusao: datetime | None
    ) -> bool:
        # Concluir exige tarefa aberta; reabrir exige tarefa concluída.
        estado_anterior = TarefaModel.data_conclusao.is_null(data_conclusao is not None)
        query = TarefaModel.update(data_conclusao=para_banco(data_conclusao)).where(
            self._do_usuario(id_usuario, id_tarefa) & estado_anterior
        )
        return query.execute() > 0

    def excluir(self, id_usuario: int, id_tarefa: int) -> bool:
        query = TarefaModel.delete().where(self._do_usuario(id_usuario, id_tarefa))
        return query.execute() > 0
