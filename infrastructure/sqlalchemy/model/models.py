from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from infrastructure.sqlalchemy.session.db import Base


class CategoriaModel(Base):
    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, autoincrement=True)
    descricao = Column(String, nullable=False)


class TarefaModel(Base):
    __tablename__ = "tarefas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    descricao = Column(Text, nullable=False)
    id_categoria = Column(Integer, nullable=False, index=True)
    id_usuario = Column(Integer, nullable=False, index=True)
    data_conclusao = Column(DateTime, nullable=True)


class UsuarioModel(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    login = Column(String, nullable=False, unique=True)
    nome = Column(String, nullable=False)
    admin = Column(Boolean, nullable=False, default=False)


class AutenticacaoModel(Base):
    __tablename__ = "autenticacoes"

    id = Column(String, primary_key=True)
    id_usuario = Column(Integer, nullable=False, index=True)
