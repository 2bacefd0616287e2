from datetime import datetime
from typing import Any

from sqlalchemy import func

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.sqlalchemy.session.db import get_session
from infrastructure.sqlalchemy.model.models import TarefaModel
from infrastructure.utc import do_banco, para_banco


def _to_domain(tarefa_model: TarefaModel) -> Tarefa:
    return Tarefa(
        id=tarefa_model.id,
        descricao=tarefa_model.descricao,
        id_categoria=tarefa_model.id_categoria,
        id_usuario=tarefa_model.id_usuario,
        data_conclusao=do_banco(tarefa_model.data_conclusao),
    )


class SqlAlchemyTarefaRepository(TarefaRepository):
    def _do_usuario(self, session, id_usuario: int, id_tarefa: int):
        return session.query(TarefaModel).filter(
            TarefaModel.id == id_tarefa, TarefaModel.id_usuario == id_usuario
        )

    def cadastrar(self, tarefa: Tarefa) -> int:
        session = get_session()
        try:
            tarefa_model = TarefaModel(
                descricao=tarefa.descricao,
                id_categoria=tarefa.id_categoria,
                id_usuario=tarefa.id_usuario,
                data_conclusao=para_banco(tarefa.data_conclusao),
            )
            session.add(tarefa_model)
            session.commit()
            tarefa.id = tarefa_model.id
            return tarefa_model.id
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def listar(self, id_usuario: int, termo: str | None = None) -> list[Tarefa]:
        session = get_session()
        try:
            query = session.query(TarefaModel).filter(
                TarefaModel.id_usuario == id_usuario
            )
            if termo:
                query = query.filter(
                    func.lower(TarefaModel.descricao).contains(
                        termo.lower(), autoescape=True
                    )
                )
            return [_to_domain(t) for t in query.order_by(TarefaModel.id).all()]
        finally:
            session.close()

    def obter(self, id_usuario: int, id_tarefa: int) -> Tarefa | None:
        session = get_session()
        try:
            tarefa_model = self._do_usuario(session, id_usuario, id_tarefa).first()
            if tarefa_model is None:
                return None
            return _to_domain(tarefa_model)
        finally:
            session.close()

    def _update(self, query, valores: dict[str, Any]) -> bool:
        session = query.session
        try:
            linhas = query.update(valores, synchronize_session=False)
            session.commit()
            return linhas > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def alterar(
        self, id_usuario: int, id_tarefa: int, alteracoes: dict[str, Any]
    ) -> bool:
        session = get_session()
        if self._update(self._do_usuario(session, id_usuario, id_tarefa), alteracoes):
            return True
        # MySQL conta linhas alteradas, não encontradas: valores iguais dão 0.
        return self.obter(id_usuario, id_tarefa) is not None

    def definir_conclusao(
        self, id_usuario: int, id_tarefa: int, data_conclusao: datetime | None
    ) -> bool:
        session = get_session()
        query = self._do_usuario(session, id_usuario, id_tarefa)
        # Concluir exige tarefa aberta; reabrir exige tarefa concluída.
        if data_conclusao is not None:
            query = query.filter(TarefaModel.data_conclusao.is_(None))
        else:
            query = query.filter(TarefaModel.data_conclusao.is_not(None))
        return self._update(query, {"data_conclusao": para_banco(data_conclusao)})

    def excluir(self, id_usuario: int, id_tarefa: int) -> bool:
        session = get_session()
        try:
            linhas = self._do_usuario(session, id_usuario, id_tarefa).delete(
                synchronize_session=False
            )
            session.commit()
            return linhas > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
