from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Tarefa:
    descricao: str
    id_categoria: int
    id_usuario: int
    data_conclusao: datetime | None = None
    id: int | None = None

    @property
    def concluida(self) -> bool:
        return self.data_conclusao is not None
