from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import health, holders
from app.core.config import settings
from app.db.session import init_db
from app.core.logging_setup import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    # Inicializa banco / tabelas
    init_db()
    yield


def _normalize_origin(value: str | None) -> str | None:
    if not value:
        return None
    cleaned = value.strip().rstrip("/")
    return cleaned or None


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.project_name,
        debug=settings.debug,
        lifespan=lifespan,
    )

    logger.info("Holder Registry API inicializada")

    # ===============================================================
    # CORS
    # ===============================================================
    origins: list[str] = []
    for item in settings.allowed_origins:
        normalized = _normalize_origin(item)
        if normalized and normalized not in origins:
            origins.append(normalized)

    logger.info(f"CORS configurado com origins: {origins}")

    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ===============================================================
    # ROTAS
    # ===============================================================
    application.include_router(health.router, prefix="/health")
    application.include_router(holders.router, prefix=settings.api_v1_str)

    # ===============================================================
    # ROTA RAIZ
    # ===============================================================
    @application.get("/")
    def root():
        return {"service": settings.project_name}

    return application


app = create_app()
