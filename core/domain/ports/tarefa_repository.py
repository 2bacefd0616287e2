from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from core.domain.models.tarefa import Tarefa


class TarefaRepository(ABC):
    """
    Armazenamento de tarefas.

    Toda operação recebe o id do dono e filtra por ele; uma tarefa de outro
    usuário se comporta exatamente como uma tarefa inexistente.
    """

    @abstractmethod
    def cadastrar(self, tarefa: Tarefa) -> int:
        raise NotImplementedError

    @abstractmethod
    def listar(self, id_usuario: int, termo: str | None = None) -> list[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def obter(self, id_usuario: int, id_tarefa: int) -> Tarefa | None:
        raise NotImplementedError

    @abstractmethod
    def alterar(
        self, id_usuario: int, id_tarefa: int, alteracoes: dict[str, Any]
    ) -> bool:
        raise NotImplementedError

    @abstractmethod
    def definir_conclusao(
        self, id_usuario: int, id_tarefa: int, data_conclusao: datetime | None
    ) -> bool:
        """
        Escrita condicional do estado da tarefa.

        Com `data_conclusao` preenchida só altera uma tarefa aberta; com None
        só altera uma tarefa concluída. Retorna True se algum registro mudou.
        """
        raise NotImplementedError

    @abstractmethod
    def excluir(self, id_usuario: int, id_tarefa: int) -> bool:
        raise NotImplementedError
