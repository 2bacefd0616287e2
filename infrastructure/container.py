import logging
import os

from core.application.alterar_tarefa import AlterarTarefaUseCase
from core.application.cadastrar_tarefa import CadastrarTarefaUseCase
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.consultar_tarefa import ConsultarTarefaUseCase
from core.application.consultar_tarefas import ConsultarTarefasUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.listar_categorias import ListarCategoriasUseCase
from core.application.reabrir_tarefa import ReabrirTarefaUseCase
from core.domain.ports.categoria_repository import CategoriaRepository
from core.domain.ports.provedor_de_identidade import ProvedorDeIdentidade
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


def _orm() -> str:
    return os.getenv("ORM", "peewee").lower()


# Adapters are imported lazily so only the selected driver is loaded.
def get_tarefa_repository() -> TarefaRepository:
    orm = _orm()

    if orm == "mongo":
        from infrastructure.mongo.repository.tarefa_repository import (
            MongoTarefaRepository,
        )

        return MongoTarefaRepository()
    elif orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.tarefa_repository import (
            SqlAlchemyTarefaRepository,
        )

        return SqlAlchemyTarefaRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.tarefa_repository import (
        PeeweeTarefaRepository,
    )

    return PeeweeTarefaRepository()


def get_categoria_repository() -> CategoriaRepository:
    orm = _orm()

    if orm == "mongo":
        from infrastructure.mongo.repository.categoria_repository import (
            MongoCategoriaRepository,
        )

        return MongoCategoriaRepository()
    elif orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.categoria_repository import (
            SqlAlchemyCategoriaRepository,
        )

        return SqlAlchemyCategoriaRepository()
    from infrastructure.peewee.repository.categoria_repository import (
        PeeweeCategoriaRepository,
    )

    return PeeweeCategoriaRepository()


def get_provedor_de_identidade() -> ProvedorDeIdentidade:
    orm = _orm()

    if orm == "mongo":
        from infrastructure.mongo.repository.provedor_de_identidade import (
            MongoProvedorDeIdentidade,
        )

        return MongoProvedorDeIdentidade()
    elif orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.provedor_de_identidade import (
            SqlAlchemyProvedorDeIdentidade,
        )

        return SqlAlchemyProvedorDeIdentidade()
    from infrastructure.peewee.repository.provedor_de_identidade import (
        PeeweeProvedorDeIdentidade,
    )

    return PeeweeProvedorDeIdentidade()


def init_storage() -> None:
    """Cria tabelas e categorias padrão do backend selecionado."""
    orm = _orm()
    logger.info(f"Inicializando armazenamento ({orm})")

    if orm == "mongo":
        from infrastructure.mongo.repository.categoria_repository import (
            MongoCategoriaRepository,
        )
        from infrastructure.mongo.session.client import init_db

        init_db()
        MongoCategoriaRepository().garantir_padroes()
    elif orm == "sqlalchemy":
        from infrastructure.sqlalchemy.session.db import init_db

        init_db()
    else:
        from infrastructure.peewee.session.db import init_db

        init_db()


def get_cadastrar_tarefa_use_case() -> CadastrarTarefaUseCase:
    return CadastrarTarefaUseCase(
        repository=get_tarefa_repository(), categorias=get_categoria_repository()
    )


def get_consultar_tarefas_use_case() -> ConsultarTarefasUseCase:
    return ConsultarTarefasUseCase(repository=get_tarefa_repository())


def get_consultar_tarefa_use_case() -> ConsultarTarefaUseCase:
    return ConsultarTarefaUseCase(repository=get_tarefa_repository())


def get_alterar_tarefa_use_case() -> AlterarTarefaUseCase:
    return AlterarTarefaUseCase(
        repository=get_tarefa_repository(), categorias=get_categoria_repository()
    )


def get_concluir_tarefa_use_case() -> ConcluirTarefaUseCase:
    return ConcluirTarefaUseCase(repository=get_tarefa_repository())


def get_reabrir_tarefa_use_case() -> ReabrirTarefaUseCase:
    return ReabrirTarefaUseCase(repository=get_tarefa_repository())


def get_excluir_tarefa_use_case() -> ExcluirTarefaUseCase:
    return ExcluirTarefaUseCase(repository=get_tarefa_repository())


def get_listar_categorias_use_case() -> ListarCategoriasUseCase:
    return ListarCategoriasUseCase(repository=get_categoria_repository())
