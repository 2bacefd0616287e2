from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    alterar_tarefa_use_case,
    cadastrar_tarefa_use_case,
    concluir_tarefa_use_case,
    consultar_tarefa_use_case,
    consultar_tarefas_use_case,
    excluir_tarefa_use_case,
    reabrir_tarefa_use_case,
    usuario_autenticado,
)
from backend_fastapi.api.schemas import (
    AlterarTarefaBody,
    CadastrarTarefaBody,
    ErroOut,
    TarefaCriada,
    TarefaDetalhe,
    TarefaResumo,
)
from core.application.alterar_tarefa import AlterarTarefaCommand, AlterarTarefaUseCase
from core.application.cadastrar_tarefa import (
    CadastrarTarefaCommand,
    CadastrarTarefaUseCase,
)
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.consultar_tarefa import ConsultarTarefaUseCase
from core.application.consultar_tarefas import ConsultarTarefasUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.reabrir_tarefa import ReabrirTarefaUseCase
from core.domain.models.tarefa import Tarefa
from core.domain.models.usuario import Usuario

router = APIRouter(
    prefix="/tarefas",
    tags=["tarefas"],
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErroOut}},
)

_NAO_ENCONTRADA = {status.HTTP_404_NOT_FOUND: {"model": ErroOut}}
_INVALIDA = {422: {"model": ErroOut}}


@router.post(
    "",
    response_model=TarefaCriada,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar uma nova tarefa",
    responses=_INVALIDA,
)
def cadastrar_tarefa(
    body: CadastrarTarefaBody,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: CadastrarTarefaUseCase = Depends(cadastrar_tarefa_use_case),
) -> TarefaCriada:
    """
    Cadastra uma tarefa aberta para o usuário autenticado.

    - **descricao**: Descrição não vazia.
    - **id_categoria**: Id de uma categoria existente.
    """
    cmd = CadastrarTarefaCommand(descricao=body.descricao, id_categoria=body.id_categoria)
    return TarefaCriada(id=use_case.execute(usuario, cmd))


@router.get(
    "",
    response_model=list[TarefaResumo],
    summary="Consultar as tarefas do usuário",
)
def consultar_tarefas(
    termo: str | None = None,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: ConsultarTarefasUseCase = Depends(consultar_tarefas_use_case),
) -> list[Tarefa]:
    """
    Lista as tarefas do usuário autenticado.

    - **termo**: Trecho da descrição, sem diferenciar maiúsculas de minúsculas.
    """
    return use_case.execute(usuario, termo)


@router.get(
    "/{id_tarefa}",
    response_model=TarefaDetalhe,
    summary="Consultar uma tarefa",
    responses=_NAO_ENCONTRADA,
)
def consultar_tarefa(
    id_tarefa: int,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: ConsultarTarefaUseCase = Depends(consultar_tarefa_use_case),
) -> Tarefa:
    return use_case.execute(usuario, id_tarefa)


@router.patch(
    "/{id_tarefa}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Alterar uma tarefa",
    responses={**_NAO_ENCONTRADA, **_INVALIDA},
)
def alterar_tarefa(
    id_tarefa: int,
    body: AlterarTarefaBody,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: AlterarTarefaUseCase = Depends(alterar_tarefa_use_case),
) -> None:
    """
    Altera apenas os campos enviados.

    - **descricao**: Nova descrição.
    - **id_categoria**: Nova categoria.
    """
    cmd = AlterarTarefaCommand(descricao=body.descricao, id_categoria=body.id_categoria)
    use_case.execute(usuario, id_tarefa, cmd)


@router.post(
    "/{id_tarefa}/concluir",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Concluir uma tarefa",
    responses={**_NAO_ENCONTRADA, **_INVALIDA},
)
def concluir_tarefa(
    id_tarefa: int,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: ConcluirTarefaUseCase = Depends(concluir_tarefa_use_case),
) -> None:
    use_case.execute(usuario, id_tarefa)


@router.post(
    "/{id_tarefa}/reabrir",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reabrir uma tarefa concluída",
    responses={**_NAO_ENCONTRADA, **_INVALIDA},
)
def reabrir_tarefa(
    id_tarefa: int,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: ReabrirTarefaUseCase = Depends(reabrir_tarefa_use_case),
) -> None:
    use_case.execute(usuario, id_tarefa)


@router.delete(
    "/{id_tarefa}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Excluir uma tarefa",
    responses=_NAO_ENCONTRADA,
)
def excluir_tarefa(
    id_tarefa: int,
    usuario: Usuario = Depends(usuario_autenticado),
    use_case: ExcluirTarefaUseCase = Depends(excluir_tarefa_use_case),
) -> None:
    use_case.execute(usuario, id_tarefa)
