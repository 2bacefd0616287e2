import logging
import os

import uvicorn
from dotenv import load_dotenv

from infrastructure.logging_setup import configurar_logging

load_dotenv()

logger = logging.getLogger(__name__)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on", "sim"}


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = _as_bool(os.getenv("RELOAD", "true"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()
    orm = os.getenv("ORM", "peewee")

    configurar_logging(log_level)
    logger.info(f"Tarefas API em http://{host}:{port} (ORM: {orm}, reload: {reload})")

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
