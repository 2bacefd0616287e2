from abc import ABC, abstractmethod

from core.domain.models.usuario import Usuario


class ProvedorDeIdentidade(ABC):
    @abstractmethod
    def resolver_identidade(self, token: str | None) -> Usuario:
        """
        Resolve um token de sessão para o usuário autenticado.

        Raises:
            TokenInvalido: se o token estiver ausente ou não existir.
        """
        raise NotImplementedError
