from pydantic import BaseModel, Field

from core.domain.models.usuario import Usuario


class UsuarioMongo(BaseModel):
    id: int = Field(alias="_id")
    login: str
    nome: str
    admin: bool = False

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_domain(self) -> Usuario:
        return Usuario(id=self.id, login=self.login, nome=self.nome, admin=self.admin)
