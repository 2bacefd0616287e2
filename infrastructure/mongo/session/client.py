import os
from typing import Any

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtém o cliente do MongoDB (Singleton).

    O MongoClient só abre conexão na primeira operação.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri)
    return _client


def get_db() -> Database[Any]:
    """
    Obtém o banco de dados do MongoDB.

    Retorna:
        Database: A instância do banco configurado em MONGO_DB_NAME.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "tarefas")
    return client[db_name]


def init_db() -> None:
    """Cria o índice das consultas por dono (`id_usuario` + `_id`)."""
    get_db().tarefas.create_index([("id_usuario", ASCENDING), ("_id", ASCENDING)])
