import importlib
import os
import unittest
from datetime import datetime, timezone
from unittest import mock

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from core.domain.erros import TokenInvalido
from core.domain.models.tarefa import Tarefa

try:
    from infrastructure.peewee.session.db import db, init_db
    from infrastructure.peewee.model.models import (
        TABELAS,
        AutenticacaoModel,
        UsuarioModel,
    )
    from infrastructure.peewee.repository.categoria_repository import (
        PeeweeCategoriaRepository,
    )
    from infrastructure.peewee.repository.provedor_de_identidade import (
        PeeweeProvedorDeIdentidade,
    )
    from infrastructure.peewee.repository.tarefa_repository import (
        PeeweeTarefaRepository,
    )
    HAS_PEEWEE = True
except ImportError:
    HAS_PEEWEE = False

CONCLUSAO = datetime(2026, 5, 1, 12, 30, tzinfo=timezone.utc)


@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeTarefaRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        init_db()
        self.repo = PeeweeTarefaRepository()

    def tearDown(self) -> None:
        db.drop_tables(TABELAS)
        db.close()

    def _nova(self, descricao: str = "Tarefa Peewee", id_usuario: int = 1) -> int:
        return self.repo.cadastrar(
            Tarefa(descricao=descricao, id_categoria=2, id_usuario=id_usuario)
        )

    def test_cadastrar_and_obter(self) -> None:
        tarefa = Tarefa(descricao="Tarefa Peewee", id_categoria=2, id_usuario=1)

        id_tarefa = self.repo.cadastrar(tarefa)
        loaded = self.repo.obter(1, id_tarefa)

        self.assertEqual(tarefa.id, id_tarefa)
        self.assertIsNotNone(loaded)
        assert loaded is not None
        self.assertEqual(loaded.id, id_tarefa)
        self.assertEqual(loaded.descricao, "Tarefa Peewee")
        self.assertEqual(loaded.id_categoria, 2)
        self.assertIsNone(loaded.data_conclusao)

    def test_ids_sao_sequenciais(self) -> None:
        self.assertEqual(self._nova(), 1)
        self.assertEqual(self._nova(), 2)

    def test_obter_de_outro_usuario_retorna_none(self) -> None:
        id_tarefa = self._nova(id_usuario=1)

        self.assertIsNone(self.repo.obter(2, id_tarefa))

    def test_listar_filtra_por_usuario_e_termo(self) -> None:
        self._nova("Comprar LEITE", id_usuario=1)
        self._nova("lavar carro", id_usuario=1)
        self._nova("leite da clara", id_usuario=2)

        self.assertEqual(len(self.repo.listar(1)), 2)
        self.assertEqual(
            [t.descricao for t in self.repo.listar(1, "leite")], ["Comprar LEITE"]
        )
        self.assertEqual(
            [t.descricao for t in self.repo.listar(2)], ["leite da clara"]
        )

    def test_alterar_respeita_dono(self) -> None:
        id_tarefa = self._nova()

        self.assertFalse(self.repo.alterar(2, id_tarefa, {"descricao": "x"}))
        self.assertTrue(self.repo.alterar(1, id_tarefa, {"id_categoria": 3}))

        loaded = self.repo.obter(1, id_tarefa)
        assert loaded is not None
        self.assertEqual(loaded.descricao, "Tarefa Peewee")
        self.assertEqual(loaded.id_categoria, 3)

    def test_definir_conclusao_e_condicional(self) -> None:
        id_tarefa = self._nova()

        self.assertFalse(self.repo.definir_conclusao(1, id_tarefa, None))
        self.assertTrue(self.repo.definir_conclusao(1, id_tarefa, CONCLUSAO))
        self.assertFalse(self.repo.definir_conclusao(1, id_tarefa, CONCLUSAO))

        loaded = self.repo.obter(1, id_tarefa)
        assert loaded is not None
        self.assertEqual(loaded.data_conclusao, CONCLUSAO)

        self.assertTrue(self.repo.definir_conclusao(1, id_tarefa, None))
        loaded = self.repo.obter(1, id_tarefa)
        assert loaded is not None
        self.assertIsNone(loaded.data_conclusao)

    def test_definir_conclusao_de_outro_usuario(self) -> None:
        id_tarefa = self._nova()

        self.assertFalse(self.repo.definir_conclusao(2, id_tarefa, CONCLUSAO))

    def test_excluir(self) -> None:
        id_tarefa = self._nova()

        self.assertFalse(self.repo.excluir(2, id_tarefa))
        self.assertTrue(self.repo.excluir(1, id_tarefa))
        self.assertFalse(self.repo.excluir(1, id_tarefa))
        self.assertIsNone(self.repo.obter(1, id_tarefa))

    def test_alterar_sem_linhas_alteradas_confere_existencia(self) -> None:
        id_tarefa = self._nova()

        # Bancos que contam só linhas modificadas devolvem 0 para valores iguais.
        with mock.patch("peewee.ModelUpdate.execute", return_value=0):
            self.assertTrue(
                self.repo.alterar(1, id_tarefa, {"descricao": "Tarefa Peewee"})
            )
            self.assertFalse(
                self.repo.alterar(2, id_tarefa, {"descricao": "Tarefa Peewee"})
            )

    def test_construir_repositorio_nao_abre_conexao(self) -> None:
        db.close()

        PeeweeTarefaRepository()
        PeeweeCategoriaRepository()
        PeeweeProvedorDeIdentidade()

        self.assertTrue(db.is_closed())

    def test_sessao_peewee_nao_expoe_get_db(self) -> None:
        sessao = importlib.import_module("infrastructure.peewee.session.db")

        self.assertTrue(callable(sessao.init_db))
        self.assertFalse(hasattr(sessao, "get_db"))


@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeCategoriaRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        init_db()
        self.repo = PeeweeCategoriaRepository()

    def tearDown(self) -> None:
        db.drop_tables(TABELAS)
        db.close()

    def test_categorias_padrao_sao_criadas_uma_vez(self) -> None:
        init_db()

        self.assertEqual(
            [c.descricao for c in self.repo.listar()],
            ["Pessoal", "Trabalho", "Estudos"],
        )

    def test_existe(self) -> None:
        self.assertTrue(self.repo.existe(1))
        self.assertFalse(self.repo.existe(99))


@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeProvedorDeIdentidadeTests(unittest.TestCase):
    def setUp(self) -> None:
        init_db()
        self.provedor = PeeweeProvedorDeIdentidade()
        usuario = UsuarioModel.create(login="pedro", nome="Pedro")
        AutenticacaoModel.create(id="f3a86b8f-49a7", id_usuario=usuario.id)

    def tearDown(self) -> None:
        db.drop_tables(TABELAS)
        db.close()

    def test_resolve_token_existente(self) -> None:
        usuario = self.provedor.resolver_identidade("f3a86b8f-49a7")

        self.assertEqual(usuario.login, "pedro")
        self.assertEqual(usuario.nome, "Pedro")
        self.assertFalse(usuario.admin)

    def test_token_desconhecido_ou_ausente(self) -> None:
        for token in ("nao-existe", None, ""):
            with self.subTest(token=token):
                with self.assertRaises(TokenInvalido):
                    self.provedor.resolver_identidade(token)


if __name__ == "__main__":
    unittest.main()
