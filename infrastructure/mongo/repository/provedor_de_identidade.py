from typing import Any

from pymongo.collection import Collection

from core.domain.erros import TokenInvalido
from core.domain.models.usuario import Usuario
from core.domain.ports.provedor_de_identidade import ProvedorDeIdentidade
from infrastructure.mongo.models.usuario import UsuarioMongo
from infrastructure.mongo.session.client import get_db


class MongoProvedorDeIdentidade(ProvedorDeIdentidade):
    """
    Resolve tokens pela coleção `autenticacoes` ({_id: token, id_usuario}),
    juntando com `usuarios` em uma única agregação.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.autenticacoes

    def resolver_identidade(self, token: str | None) -> Usuario:
        if not token:
            raise TokenInvalido("Token é necessário para autenticar.")
        pipeline = [
            {"$match": {"_id": token}},
            {
                "$lookup": {
                    "from": "usuarios",
                    "localField": "id_usuario",
                    "foreignField": "_id",
                    "as": "usuario",
                }
            },
            {"$unwind": "$usuario"},
            {"$replaceRoot": {"newRoot": "$usuario"}},
            {"$limit": 1},
        ]
        docs = list(self.collection.aggregate(pipeline))
        if not docs:
            raise TokenInvalido()
        return UsuarioMongo(**docs[0]).to_domain()
