from core.domain.erros import TokenInvalido
from core.domain.models.usuario import Usuario
from core.domain.ports.provedor_de_identidade import ProvedorDeIdentidade
from infrastructure.peewee.model.models import AutenticacaoModel, UsuarioModel


class PeeweeProvedorDeIdentidade(ProvedorDeIdentidade):
    def resolver_identidade(self, token: str | None) -> Usuario:
        if not token:
            raise TokenInvalido("Token é necessário para autenticar.")
        usuario = (
            UsuarioModel.select()
            .join(
                AutenticacaoModel,
                on=(AutenticacaoModel.id_usuario == UsuarioModel.id),
            )
            .where(AutenticacaoModel.id == token)
            .first()
        )
        if usuario is None:
            raise TokenInvalido()
        return Usuario(
            id=usuario.id, login=usuario.login, nome=usuario.nome, admin=usuario.admin
        )
