from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Categoria:
    id: int
    descricao: str


# Criadas na inicialização do armazenamento quando ainda não existem.
CATEGORIAS_PADRAO = ("Pessoal", "Trabalho", "Estudos")
