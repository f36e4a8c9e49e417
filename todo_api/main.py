"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l’instance FastAPI et configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

gestion des erreurs ({"error": "..."}) et log de chaque requête

schéma OpenAPI personnalisé

Inclut le router /todos et installe le store en mémoire (seedé) sur app.state.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn todo_api.main:app, ou la commande todo-api.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.v1.routers import todos
from todo_api.core.config import Settings, settings as default_settings
from todo_api.core.errors import register_exception_handlers
from todo_api.core.logging import configure_logging
from todo_api.core.openapi import custom_openapi
from todo_api.db.seed import build_seed
from todo_api.domain.repositories import InMemoryTodoRepository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s started (%s) with %d todos",
            settings.APP_NAME,
            settings.ENV,
            app.state.todo_repository.count(),
        )
        yield
        logger.info("%s stopped", settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        openapi_tags=[
            {"name": "todos", "description": "CRUD sur la liste de todos en mémoire"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = InMemoryTodoRepository(build_seed(settings))

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    # Routers
    app.include_router(todos.router)

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "todo_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=(default_settings.ENV == "dev"),
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()  # http://localhost:8080
