from core.domain.erros import TarefaNaoEncontrada
from core.domain.models.tarefa import Tarefa
from core.domain.models.usuario import Usuario
from core.domain.ports.tarefa_repository import TarefaRepository


class ConsultarTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, usuario: Usuario, id_tarefa: int) -> Tarefa:
        tarefa = self._repository.obter(usuario.id, id_tarefa)
        if tarefa is None:
            raise TarefaNaoEncontrada(id_tarefa)
        return tarefa
