import logging

# uvicorn aceita "trace", que o logging padrão não conhece.
_NIVEIS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def nivel_de(nome: str | None) -> int:
    """Converte um LOG_LEVEL no nível do logging; desconhecidos viram INFO."""
    return _NIVEIS.get((nome or "info").strip().lower(), logging.INFO)


def configurar_logging(nome: str | None) -> None:
    logging.basicConfig(
        level=nivel_de(nome),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
