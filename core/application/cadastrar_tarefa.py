import logging
from dataclasses import dataclass

from core.domain.models.tarefa import Tarefa
from core.domain.models.usuario import Usuario
from core.domain.ports.categoria_repository import CategoriaRepository
from core.domain.ports.tarefa_repository import TarefaRepository
from core.domain.validacao import validar_categoria, validar_descricao

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CadastrarTarefaCommand:
    descricao: str
    id_categoria: int


class CadastrarTarefaUseCase:
    def __init__(
        self, repository: TarefaRepository, categorias: CategoriaRepository
    ) -> None:
        self._repository = repository
        self._categorias = categorias

    def execute(self, usuario: Usuario, cmd: CadastrarTarefaCommand) -> int:
        tarefa = Tarefa(
            descricao=validar_descricao(cmd.descricao),
            id_categoria=validar_categoria(cmd.id_categoria, self._categorias),
            id_usuario=usuario.id,
        )
        id_tarefa = self._repository.cadastrar(tarefa)
        logger.info(f"Tarefa {id_tarefa} cadastrada por {usuario.login}")
        return id_tarefa
