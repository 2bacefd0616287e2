import logging

from core.domain.erros import EstadoInvalido, TarefaNaoEncontrada
from core.domain.models.usuario import Usuario
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


class ReabrirTarefaUseCase:
    """Concluída -> Aberta. Reabrir uma tarefa aberta lança EstadoInvalido."""

    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, usuario: Usuario, id_tarefa: int) -> None:
        if self._repository.definir_conclusao(usuario.id, id_tarefa, None):
            logger.info(f"Tarefa {id_tarefa} reaberta por {usuario.login}")
            return

        if self._repository.obter(usuario.id, id_tarefa) is None:
            raise TarefaNaoEncontrada(id_tarefa)
        logger.warning(f"Tarefa {id_tarefa} não estava concluída")
        raise EstadoInvalido(
            "TarefaNaoConcluida", f"Tarefa {id_tarefa} não está concluída."
        )
