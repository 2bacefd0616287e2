from core.domain.erros import TokenInvalido
from core.domain.models.usuario import Usuario
from core.domain.ports.provedor_de_identidade import ProvedorDeIdentidade
from infrastructure.sqlalchemy.session.db import get_session
from infrastructure.sqlalchemy.model.models import AutenticacaoModel, UsuarioModel


class SqlAlchemyProvedorDeIdentidade(ProvedorDeIdentidade):
    def resolver_identidade(self, token: str | None) -> Usuario:
        if not token:
            raise TokenInvalido("Token é necessário para autenticar.")
        session = get_session()
        try:
            usuario_model = (
                session.query(UsuarioModel)
                .join(AutenticacaoModel, AutenticacaoModel.id_usuario == UsuarioModel.id)
                .filter(AutenticacaoModel.id == token)
                .first()
            )
            if usuario_model is None:
                raise TokenInvalido()
            return Usuario(
                id=usuario_model.id,
                login=usuario_model.login,
                nome=usuario_model.nome,
                admin=usuario_model.admin,
            )
        finally:
            session.close()
