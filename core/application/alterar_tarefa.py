import logging
from dataclasses import dataclass
from typing import Any

from core.domain.erros import TarefaNaoEncontrada
from core.domain.models.usuario import Usuario
from core.domain.ports.categoria_repository import CategoriaRepository
from core.domain.ports.tarefa_repository import TarefaRepository
from core.domain.validacao import validar_categoria, validar_descricao

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AlterarTarefaCommand:
    """Campos None não são alterados."""

    descricao: str | None = None
    id_categoria: int | None = None


class AlterarTarefaUseCase:
    def __init__(
        self, repository: TarefaRepository, categorias: CategoriaRepository
    ) -> None:
        self._repository = repository
        self._categorias = categorias

    def execute(
        self, usuario: Usuario, id_tarefa: int, cmd: AlterarTarefaCommand
    ) -> None:
        alteracoes: dict[str, Any] = {}
        if cmd.descricao is not None:
            alteracoes["descricao"] = validar_descricao(cmd.descricao)
        if cmd.id_categoria is not None:
            alteracoes["id_categoria"] = validar_categoria(
                cmd.id_categoria, self._categorias
            )

        if not alteracoes:
            if self._repository.obter(usuario.id, id_tarefa) is None:
                raise TarefaNaoEncontrada(id_tarefa)
            return

        if not self._repository.alterar(usuario.id, id_tarefa, alteracoes):
            raise TarefaNaoEncontrada(id_tarefa)
        logger.info(
            f"Tarefa {id_tarefa} alterada por {usuario.login}: {sorted(alteracoes)}"
        )
