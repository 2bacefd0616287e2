import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app
from core.application.alterar_tarefa import AlterarTarefaUseCase
from core.application.cadastrar_tarefa import CadastrarTarefaUseCase
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.consultar_tarefa import ConsultarTarefaUseCase
from core.application.consultar_tarefas import ConsultarTarefasUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.listar_categorias import ListarCategoriasUseCase
from core.application.reabrir_tarefa import ReabrirTarefaUseCase
from core.domain.models.usuario import Usuario
from fakes import (
    InMemoryCategoriaRepository,
    InMemoryProvedorDeIdentidade,
    InMemoryTarefaRepository,
)

PEDRO = {"Authorization": "Bearer token-pedro"}
CLARA = {"Authorization": "Bearer token-clara"}


@pytest.fixture
def client():
    repo = InMemoryTarefaRepository()
    categorias = InMemoryCategoriaRepository()
    provedor = InMemoryProvedorDeIdentidade(
        {
            "token-pedro": Usuario(id=1, login="pedro", nome="Pedro"),
            "token-clara": Usuario(id=2, login="clara", nome="Clara"),
        }
    )
    app.dependency_overrides = {
        deps.provedor_de_identidade: lambda: provedor,
        deps.cadastrar_tarefa_use_case: lambda: CadastrarTarefaUseCase(repo, categorias),
        deps.consultar_tarefas_use_case: lambda: ConsultarTarefasUseCase(repo),
        deps.consultar_tarefa_use_case: lambda: ConsultarTarefaUseCase(repo),
        deps.alterar_tarefa_use_case: lambda: AlterarTarefaUseCase(repo, categorias),
        deps.concluir_tarefa_use_case: lambda: ConcluirTarefaUseCase(repo),
        deps.reabrir_tarefa_use_case: lambda: ReabrirTarefaUseCase(repo),
        deps.excluir_tarefa_use_case: lambda: ExcluirTarefaUseCase(repo),
        deps.listar_categorias_use_case: lambda: ListarCategoriasUseCase(categorias),
    }
    yield TestClient(app)
    app.dependency_overrides = {}


def _cadastrar(client, descricao="comprar leite", id_categoria=2, headers=PEDRO) -> int:
    resp = client.post(
        "/tarefas",
        json={"descricao": descricao, "id_categoria": id_categoria},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def test_sem_token_retorna_401(client) -> None:
    resp = client.get("/tarefas")

    assert resp.status_code == 401
    assert resp.json()["erro"] == "TokenInvalido"


def test_token_desconhecido_retorna_401(client) -> None:
    resp = client.get("/tarefas", headers={"Authorization": "Bearer outro"})

    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_cadastrar_e_consultar(client) -> None:
    id_tarefa = _cadastrar(client)

    resp = client.get(f"/tarefas/{id_tarefa}", headers=PEDRO)

    assert resp.status_code == 200
    assert resp.json() == {
        "descricao": "comprar leite",
        "data_conclusao": None,
        "id_categoria": 2,
    }


def test_cadastrar_com_campo_extra_e_rejeitado(client) -> None:
    resp = client.post(
        "/tarefas",
        json={"descricao": "x", "id_categoria": 1, "id_usuario": 2},
        headers=PEDRO,
    )

    assert resp.status_code == 422


def test_cadastrar_descricao_vazia_retorna_422(client) -> None:
    resp = client.post(
        "/tarefas", json={"descricao": " ", "id_categoria": 1}, headers=PEDRO
    )

    assert resp.status_code == 422
    assert resp.json()["erro"] == "DescricaoInvalida"


def test_cadastrar_categoria_inexistente_retorna_422(client) -> None:
    resp = client.post(
        "/tarefas", json={"descricao": "x", "id_categoria": 50}, headers=PEDRO
    )

    assert resp.status_code == 422
    assert resp.json()["erro"] == "CategoriaInvalida"


def test_consultar_tarefas_filtra_por_dono_e_termo(client) -> None:
    _cadastrar(client, "Comprar LEITE")
    _cadastrar(client, "lavar carro")
    _cadastrar(client, "leite da clara", headers=CLARA)

    todas = client.get("/tarefas", headers=PEDRO).json()
    filtradas = client.get("/tarefas", params={"termo": "leite"}, headers=PEDRO).json()

    assert [t["descricao"] for t in todas] == ["Comprar LEITE", "lavar carro"]
    assert filtradas == [
        {"id": 1, "descricao": "Comprar LEITE", "data_conclusao": None, "id_categoria": 2}
    ]


def test_tarefa_de_outro_usuario_retorna_404(client) -> None:
    id_tarefa = _cadastrar(client)

    assert client.get(f"/tarefas/{id_tarefa}", headers=CLARA).status_code == 404
    assert client.delete(f"/tarefas/{id_tarefa}", headers=CLARA).status_code == 404
    assert (
        client.post(f"/tarefas/{id_tarefa}/concluir", headers=CLARA).status_code == 404
    )
    resp = client.patch(f"/tarefas/{id_tarefa}", json={"descricao": "x"}, headers=CLARA)
    assert resp.status_code == 404
    assert resp.json()["erro"] == "TarefaNaoEncontrada"


def test_alterar_parcialmente(client) -> None:
    id_tarefa = _cadastrar(client)

    resp = client.patch(f"/tarefas/{id_tarefa}", json={"descricao": "X"}, headers=PEDRO)

    assert resp.status_code == 204
    tarefa = client.get(f"/tarefas/{id_tarefa}", headers=PEDRO).json()
    assert tarefa["descricao"] == "X"
    assert tarefa["id_categoria"] == 2


def test_concluir_e_reabrir(client) -> None:
    id_tarefa = _cadastrar(client)

    assert client.post(f"/tarefas/{id_tarefa}/concluir", headers=PEDRO).status_code == 204
    assert client.get(f"/tarefas/{id_tarefa}", headers=PEDRO).json()["data_conclusao"]

    resp = client.post(f"/tarefas/{id_tarefa}/concluir", headers=PEDRO)
    assert resp.status_code == 422
    assert resp.json()["erro"] == "TarefaJaConcluida"

    assert client.post(f"/tarefas/{id_tarefa}/reabrir", headers=PEDRO).status_code == 204
    assert client.get(f"/tarefas/{id_tarefa}", headers=PEDRO).json()["data_conclusao"] is None

    resp = client.post(f"/tarefas/{id_tarefa}/reabrir", headers=PEDRO)
    assert resp.status_code == 422
    assert resp.json()["erro"] == "TarefaNaoConcluida"


def test_excluir(client) -> None:
    id_tarefa = _cadastrar(client)

    assert client.delete(f"/tarefas/{id_tarefa}", headers=PEDRO).status_code == 204
    assert client.get(f"/tarefas/{id_tarefa}", headers=PEDRO).status_code == 404


def test_listar_categorias(client) -> None:
    resp = client.get("/categorias")

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "descricao": "Pessoal"},
        {"id": 2, "descricao": "Trabalho"},
    ]


@pytest.mark.parametrize("id_categoria", [True, "2", 2.0])
def test_cadastrar_id_categoria_nao_inteiro_retorna_422(client, id_categoria) -> None:
    resp = client.post(
        "/tarefas",
        json={"descricao": "x", "id_categoria": id_categoria},
        headers=PEDRO,
    )

    assert resp.status_code == 422
    assert client.get("/tarefas", headers=PEDRO).json() == []


@pytest.mark.parametrize("id_categoria", [True, "1"])
def test_alterar_id_categoria_nao_inteiro_retorna_422(client, id_categoria) -> None:
    id_tarefa = _cadastrar(client, id_categoria=2)

    resp = client.patch(
        f"/tarefas/{id_tarefa}", json={"id_categoria": id_categoria}, headers=PEDRO
    )

    assert resp.status_code == 422
    assert client.get(f"/tarefas/{id_tarefa}", headers=PEDRO).json()["id_categoria"] == 2


def test_mapa_de_status_nao_usa_constantes_obsoletas() -> None:
    import importlib
    import warnings

    from backend_fastapi.api import erros
    from core.domain.erros import DadosInvalidos, EstadoInvalido

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        importlib.reload(erros)

    assert erros._status_de(DadosInvalidos("x", "x")) == 422
    assert erros._status_de(EstadoInvalido("x", "x")) == 422
