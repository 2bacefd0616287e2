import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.erros import registrar_tratadores
from backend_fastapi.api.routes.categorias import router as categorias_router
from backend_fastapi.api.routes.tarefas import router as tarefas_router
from infrastructure.container import init_storage
from infrastructure.logging_setup import configurar_logging

# Load environment variables from .env file
load_dotenv()

configurar_logging(os.getenv("LOG_LEVEL", "info"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_storage()
    yield


app = FastAPI(title="Tarefas API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

registrar_tratadores(app)
app.include_router(tarefas_router)
app.include_router(categorias_router)
