from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Usuario:
    id: int
    login: str
    nome: str
    admin: bool = False
