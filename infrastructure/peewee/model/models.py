from peewee import (
    BooleanField,
    CharField,
    DateTimeField,
    IntegerField,
    Model,
    TextField,
)
from infrastructure.peewee.session.db import db


class BaseModel(Model):
    class Meta:
        database = db


class CategoriaModel(BaseModel):
    descricao = CharField()

    class Meta:
        table_name = "categorias"


class TarefaModel(BaseModel):
    descricao = TextField()
    id_categoria = IntegerField(index=True)
    id_usuario = IntegerField(index=True)
    data_conclusao = DateTimeField(null=True)

    class Meta:
        table_name = "tarefas"


class UsuarioModel(BaseModel):
    login = CharField(unique=True)
    nome = CharField()
    admin = BooleanField(default=False)

    class Meta:
        table_name = "usuarios"


class AutenticacaoModel(BaseModel):
    id = CharField(primary_key=True)
    id_usuario = IntegerField(index=True)

    class Meta:
        table_name = "autenticacoes"


TABELAS = [CategoriaModel, TarefaModel, UsuarioModel, AutenticacaoModel]
