from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.openapi.docs import get_redoc_html

from petclinic.api.exception_handlers import register_exception_handlers
from petclinic.api.schemas import HealthOut
from petclinic.core.db import close_db, init_db
from petclinic.core.logging import setup_logging
from petclinic.core.metrics import PrometheusMetricsMiddleware, metrics_router
from petclinic.core.middleware.http_logging import HttpLoggingMiddleware
from petclinic.core.settings import get_settings
from petclinic.owners.router import router as owners_router
from petclinic.pets.router import router as pets_router
from petclinic.visits.router import router as visits_router

setup_logging()

_REDOC_JS_URL = "https://cdn.jsdelivr.net/npm/redoc@2.1.4/bundles/redoc.standalone.js"


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Settings are read on startup, not import, so DATABASE_URL isn't needed to import.
        settings = get_settings()
        init_db(app=app, database_url=str(settings.database_url))
        yield
        await close_db(app=app)

    app = FastAPI(
        title="Pet Clinic API",
        description=(
            "API for pet owners, their pets and clinic visits.\n\n"
            "- Visits are checked by scheduling rules before they are stored; rejected "
            "visits return field-level errors (e.g. `sunday.not.allowed`).\n"
            "- Logging and metrics use route templates and metadata only."
        ),
        lifespan=lifespan,
        docs_url="/swagger",
        redoc_url=None,  # custom ReDoc page at /docs
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {"name": "owners", "description": "Register, find and update pet owners."},
            {"name": "pets", "description": "Register and update an owner's pets."},
            {
                "name": "visits",
                "description": "Schedule clinic visits for a pet. Sundays are not allowed.",
            },
            {"name": "metrics", "description": "Prometheus-compatible metrics endpoint."},
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/docs", include_in_schema=False)
    async def redoc_docs():
        return get_redoc_html(
            openapi_url=app.openapi_url or "/openapi.json",
            title=f"{app.title} - ReDoc",
            redoc_js_url=_REDOC_JS_URL,
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description="Verifies the API process is up. Downstream dependencies are not checked.",
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(owners_router)
    app.include_router(pets_router)
    app.include_router(visits_router)
    return app


app = create_app()
