from core.domain.models.categoria import Categoria
from core.domain.ports.categoria_repository import CategoriaRepository


class ListarCategoriasUseCase:
    def __init__(self, repository: CategoriaRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Categoria]:
        return self._repository.listar()
