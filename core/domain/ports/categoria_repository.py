from abc import ABC, abstractmethod

from core.domain.models.categoria import Categoria


class CategoriaRepository(ABC):
    @abstractmethod
    def listar(self) -> list[Categoria]:
        raise NotImplementedError

    @abstractmethod
    def existe(self, id_categoria: int) -> bool:
        raise NotImplementedError
