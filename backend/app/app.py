"""
Aetherquill - FastAPI Backend
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database.db import init_db
from app.database.store import ProjectStore
from app.errors import ProjectError
from app.logging import setup_logging, get_logger
from app.middleware.principal import PrincipalMiddleware
from app.routers import (
    catalogue,
    characters,
    me,
    projects,
    timeline,
    worlds,
    writings,
)
from app.services.entities import EntityService
from app.services.ids import IdGenerator
from app.services.projects import ProjectService
from app.services.timeline import TimelineService

logger = get_logger('main')


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting Aetherquill API")

    database_path = app.state.database_path
    await init_db(database_path)
    logger.info("Database initialized")

    # Initialize services
    store = ProjectStore(
        db_path=database_path,
        optimistic=settings.OPTIMISTIC_CONCURRENCY,
    )
    ids = IdGenerator()
    app.state.project_service = ProjectService(store, ids)
    app.state.entity_service = EntityService(store, ids)
    app.state.timeline_service = TimelineService(store, ids)
    logger.info("Services initialized")

    yield

    logger.info("Shutting down application")


def create_app(database_path: str | None = None) -> FastAPI:
    app = FastAPI(
        title="Aetherquill API",
        description="Projects, characters, worlds and timelines for writers",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.database_path = database_path or settings.DATABASE_PATH

    app.add_middleware(PrincipalMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ProjectError)
    async def project_error_handler(request: Request, exc: ProjectError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(projects.router, prefix="/api/projects", tags=["Projects"])
    app.include_router(characters.router, prefix="/api/projects", tags=["Characters"])
    app.include_router(worlds.router, prefix="/api/projects", tags=["Worlds"])
    app.include_router(writings.router, prefix="/api/projects", tags=["Writings"])
    app.include_router(catalogue.router, prefix="/api/projects", tags=["Catalogue"])
    app.include_router(timeline.router, prefix="/api/projects", tags=["Timeline"])
    app.include_router(me.router, prefix="/api/me", tags=["Me"])

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "aetherquill",
        }

    @app.get("/")
    async def root():
        return {
            "name": "Aetherquill API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app
