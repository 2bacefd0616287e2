from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.application.alterar_tarefa import AlterarTarefaUseCase
from core.application.cadastrar_tarefa import CadastrarTarefaUseCase
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.consultar_tarefa import ConsultarTarefaUseCase
from core.application.consultar_tarefas import ConsultarTarefasUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.listar_categorias import ListarCategoriasUseCase
from core.application.reabrir_tarefa import ReabrirTarefaUseCase
from core.domain.models.usuario import Usuario
from core.domain.ports.provedor_de_identidade import ProvedorDeIdentidade
from infrastructure import container

_bearer = HTTPBearer(auto_error=False)


def provedor_de_identidade() -> ProvedorDeIdentidade:
    return container.get_provedor_de_identidade()


def usuario_autenticado(
    credenciais: HTTPAuthorizationCredentials | None = Depends(_bearer),
    provedor: ProvedorDeIdentidade = Depends(provedor_de_identidade),
) -> Usuario:
    token = credenciais.credentials if credenciais is not None else None
    return provedor.resolver_identidade(token)


def cadastrar_tarefa_use_case() -> CadastrarTarefaUseCase:
    return container.get_cadastrar_tarefa_use_case()


def consultar_tarefas_use_case() -> ConsultarTarefasUseCase:
    return container.get_consultar_tarefas_use_case()


def consultar_tarefa_use_case() -> ConsultarTarefaUseCase:
    return container.get_consultar_tarefa_use_case()


def alterar_tarefa_use_case() -> AlterarTarefaUseCase:
    return container.get_alterar_tarefa_use_case()


def concluir_tarefa_use_case() -> ConcluirTarefaUseCase:
    return container.get_concluir_tarefa_use_case()


def reabrir_tarefa_use_case() -> ReabrirTarefaUseCase:
    return container.get_reabrir_tarefa_use_case()


def excluir_tarefa_use_case() -> ExcluirTarefaUseCase:
    return container.get_excluir_tarefa_use_case()


def listar_categorias_use_case() -> ListarCategoriasUseCase:
    return container.get_listar_categorias_use_case()
