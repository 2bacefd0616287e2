from datetime import datetime

from pydantic import BaseModel, Field

from core.domain.models.tarefa import Tarefa
from infrastructure.utc import do_banco, para_banco


class TarefaMongo(BaseModel):
    """
    Modelo de Tarefa para o MongoDB.
    Representa como a tarefa é armazenada na coleção `tarefas`.
    """

    id: int = Field(alias="_id")
    descricao: str
    id_categoria: int
    id_usuario: int
    data_conclusao: datetime | None = None

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Tarefa:
        """
        Converte o documento do MongoDB para a entidade de domínio.

        Retorna:
            Tarefa: A entidade de domínio.
        """
        return Tarefa(
            id=self.id,
            descricao=self.descricao,
            id_categoria=self.id_categoria,
            id_usuario=self.id_usuario,
            data_conclusao=do_banco(self.data_conclusao),
        )

    @classmethod
    def from_domain(cls, tarefa: Tarefa, id_tarefa: int) -> "TarefaMongo":
        """
        Cria um TarefaMongo a partir de uma entidade de domínio.

        Argumentos:
            tarefa (Tarefa): A entidade de domínio.
            id_tarefa (int): O id gerado pelo contador da coleção.
        """
        return cls(
            id=id_tarefa,
            descricao=tarefa.descricao,
            id_categoria=tarefa.id_categoria,
            id_usuario=tarefa.id_usuario,
            data_conclusao=para_banco(tarefa.data_conclusao),
        )
