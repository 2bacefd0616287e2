from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictInt


class CadastrarTarefaBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    descricao: str
    id_categoria: StrictInt


class AlterarTarefaBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    descricao: str | None = None
    id_categoria: StrictInt | None = None


class TarefaCriada(BaseModel):
    id: int


class TarefaResumo(BaseModel):
    id: int
    descricao: str
    data_conclusao: datetime | None
    id_categoria: int


class TarefaDetalhe(BaseModel):
    descricao: str
    data_conclusao: datetime | None
    id_categoria: int


class CategoriaOut(BaseModel):
    id: int
    descricao: str


class ErroOut(BaseModel):
    erro: str
    mensagem: str
