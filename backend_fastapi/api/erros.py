import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.domain.erros import (
    DadosOuEstadoInvalido,
    ErroDeDominio,
    NaoEncontrado,
    TokenInvalido,
)

logger = logging.getLogger(__name__)

_STATUS_POR_ERRO: list[tuple[type[ErroDeDominio], int]] = [
    (DadosOuEstadoInvalido, 422),
    (NaoEncontrado, status.HTTP_404_NOT_FOUND),
    (TokenInvalido, status.HTTP_401_UNAUTHORIZED),
]


def _status_de(erro: ErroDeDominio) -> int:
    for tipo, codigo in _STATUS_POR_ERRO:
        if isinstance(erro, tipo):
            return codigo
    return status.HTTP_400_BAD_REQUEST


async def tratar_erro_de_dominio(request: Request, erro: ErroDeDominio) -> JSONResponse:
    codigo = _status_de(erro)
    logger.info(f"{request.method} {request.url.path} -> {codigo} ({erro.codigo})")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(erro, TokenInvalido) else None
    return JSONResponse(
        status_code=codigo,
        content={"erro": erro.codigo, "mensagem": erro.mensagem},
        headers=headers,
    )


def registrar_tratadores(app: FastAPI) -> None:
    app.add_exception_handler(ErroDeDominio, tratar_erro_de_dominio)
