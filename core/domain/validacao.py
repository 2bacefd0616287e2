from core.domain.erros import DadosInvalidos
from core.domain.ports.categoria_repository import CategoriaRepository


def validar_descricao(descricao: object) -> str:
    """Retorna a descrição sem espaços nas pontas ou lança DadosInvalidos."""
    if not isinstance(descricao, str) or not descricao.strip():
        raise DadosInvalidos("DescricaoInvalida", "A descrição não pode ser vazia.")
    return descricao.strip()


def validar_categoria(id_categoria: object, categorias: CategoriaRepository) -> int:
    # bool é subclasse de int
    if (
        not isinstance(id_categoria, int)
        or isinstance(id_categoria, bool)
        or not categorias.existe(id_categoria)
    ):
        raise DadosInvalidos(
            "CategoriaInvalida", f"Categoria {id_categoria!r} inexistente."
        )
    return id_categoria
