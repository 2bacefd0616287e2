import logging

from core.domain.erros import TarefaNaoEncontrada
from core.domain.models.usuario import Usuario
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


class ExcluirTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, usuario: Usuario, id_tarefa: int) -> None:
        if not self._repository.excluir(usuario.id, id_tarefa):
            raise TarefaNaoEncontrada(id_tarefa)
        logger.info(f"Tarefa {id_tarefa} excluída por {usuario.login}")
