"""
Conversões de datas entre o domínio e os bancos.

O domínio trabalha com datetimes com fuso (UTC); SQLite e MongoDB devolvem
datetimes ingênuos, então gravamos sempre em UTC sem fuso.
"""

from datetime import datetime, timezone


def para_banco(valor: datetime | None) -> datetime | None:
    if valor is None:
        return None
    if valor.tzinfo is not None:
        valor = valor.astimezone(timezone.utc).replace(tzinfo=None)
    return valor


def do_banco(valor: datetime | None) -> datetime | None:
    if valor is None:
        return None
    if valor.tzinfo is None:
        return valor.replace(tzinfo=timezone.utc)
    return valor.astimezone(timezone.utc)
