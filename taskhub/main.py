from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from taskhub.core.config import Settings
from taskhub.core.database import Database
from taskhub.core.logging import configure_logging
from taskhub.core.responses import register_error_handlers
from taskhub.routers import health, auth, users, workspaces, categories, tags, tasks, sessions, notifications

API_PREFIX = "/v1"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)
    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Init DB
        database.create_schema()
        yield
        database.dispose()

    app = FastAPI(
        title="taskhub API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    register_error_handlers(app)

    # Routes
    app.include_router(health.router, prefix="/health")
    for module in (auth, users, workspaces, categories, tags, tasks, sessions, notifications):
        app.include_router(module.router, prefix=API_PREFIX)

    @app.get("/")
    def root():
        return {"message": "Connection successful."}

    return app


app = create_app()
