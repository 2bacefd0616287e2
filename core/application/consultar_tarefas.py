from core.domain.models.tarefa import Tarefa
from core.domain.models.usuario import Usuario
from core.domain.ports.tarefa_repository import TarefaRepository


class ConsultarTarefasUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, usuario: Usuario, termo: str | None = None) -> list[Tarefa]:
        """
        Lista as tarefas do usuário.

        `termo` filtra por trecho da descrição, sem diferenciar maiúsculas de
        minúsculas. Termo vazio ou só com espaços equivale a não filtrar.
        """
        if termo is not None and not termo.strip():
            termo = None
        return self._repository.listar(usuario.id, termo)
