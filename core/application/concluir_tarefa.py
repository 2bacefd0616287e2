import logging
from datetime import datetime, timezone
from typing import Callable

from core.domain.erros import EstadoInvalido, TarefaNaoEncontrada
from core.domain.models.usuario import Usuario
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class ConcluirTarefaUseCase:
    """
    Aberta -> Concluída.

    Concluir uma tarefa já concluída lança EstadoInvalido; a data de conclusão
    original é preservada.
    """

    def __init__(
        self,
        repository: TarefaRepository,
        relogio: Callable[[], datetime] = _agora,
    ) -> None:
        self._repository = repository
        self._relogio = relogio

    def execute(self, usuario: Usuario, id_tarefa: int) -> None:
        if self._repository.definir_conclusao(usuario.id, id_tarefa, self._relogio()):
            logger.info(f"Tarefa {id_tarefa} concluída por {usuario.login}")
            return

        if self._repository.obter(usuario.id, id_tarefa) is None:
            raise TarefaNaoEncontrada(id_tarefa)
        logger.warning(f"Tarefa {id_tarefa} já estava concluída")
        raise EstadoInvalido("TarefaJaConcluida", f"Tarefa {id_tarefa} já concluída.")
