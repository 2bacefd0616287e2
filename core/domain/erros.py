"""
Erros de domínio reportados pelos casos de uso.

A camada HTTP traduz cada família para um status:
DadosOuEstadoInvalido -> 422, NaoEncontrado -> 404, TokenInvalido -> 401.
"""


class ErroDeDominio(Exception):
    def __init__(self, codigo: str, mensagem: str) -> None:
        super().__init__(mensagem)
        self.codigo = codigo
        self.mensagem = mensagem


class DadosOuEstadoInvalido(ErroDeDominio):
    pass


class DadosInvalidos(DadosOuEstadoInvalido):
    pass


class EstadoInvalido(DadosOuEstadoInvalido):
    pass


class NaoEncontrado(ErroDeDominio):
    pass


class TarefaNaoEncontrada(NaoEncontrado):
    """
    Tarefa inexistente ou pertencente a outro usuário.

    Os dois casos são indistinguíveis para não revelar a existência
    de tarefas alheias.
    """

    def __init__(self, id_tarefa: int) -> None:
        super().__init__("TarefaNaoEncontrada", f"Tarefa {id_tarefa} não encontrada.")
        self.id_tarefa = id_tarefa


class TokenInvalido(ErroDeDominio):
    def __init__(self, mensagem: str = "Token inválido.") -> None:
        super().__init__("TokenInvalido", mensagem)
