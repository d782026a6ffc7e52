from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from product_api.core import config
from product_api.core.config import Settings
from product_api.core.db import Database, connect_db
from product_api.core.log import configure_logging, log_requests, origin_guard
from product_api.errors import register_exception_handlers
from product_api.routers import products

DESCRIPTION = "REST API for managing products: name, price and availability."


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or config.settings
    configure_logging(settings.LOG_LEVEL)

    if database is None:
        database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A failed connection is logged and the server starts anyway
        await run_in_threadpool(connect_db, database)
        yield
        database.dispose()

    app = FastAPI(
        title="Products REST API",
        version="1.0.0",
        description=DESCRIPTION,
        docs_url="/docs",
        openapi_url="/docs/openapi.json",
        lifespan=lifespan,
    )
    app.state.database = database

    register_exception_handlers(app)

    # Middleware added last runs first: origin check, CORS headers, request log
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.middleware("http")(origin_guard(settings.allowed_origins))

    app.include_router(products.router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("product_api.main:app", host=config.settings.HOST, port=config.settings.PORT)
