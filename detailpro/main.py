"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from detailpro.config import Settings, get_settings
from detailpro.routers import (
    customers, feed, inventory, invoices, jobs, memberships, services, stats, users, vehicles,
)
from detailpro.seed import seed_demo_data
from detailpro.store import (
    ConflictError, InsufficientStockError, MissingReferenceError, Store,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build the application. A ready-made ``store`` is used as is; otherwise
    one is created from ``settings`` at startup and seeded if configured.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan events for the application.
        Handles startup and shutdown events.
        """
        # Startup
        owned = store is None
        app.state.store = Store.from_settings(settings) if owned else store
        if owned and settings.seed_demo_data:
            seed_demo_data(app.state.store)
        logger.info("%s %s ready at %s", settings.app_name, settings.app_version, settings.api_prefix)

        yield

        # Shutdown
        if owned:
            app.state.store.close()
        logger.info("Shutting down %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        ## DetailPro API

        Back office for an auto-detailing business.

        ### Entities:
        * **Customers & Vehicles**: customer records and the vehicles they own
        * **Jobs**: scheduled appointments with their services
        * **Invoices & Payments**: billing, settled automatically once paid in full
        * **Memberships**: plans and customer subscriptions
        * **Inventory**: stock levels driven by a transaction ledger
        * **Stats**: revenue and top services over a date range
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    for router in (
        users.router,
        customers.router,
        vehicles.router,
        services.router,
        jobs.router,
        invoices.router,
        invoices.payments_router,
        feed.activities_router,
        feed.reviews_router,
        memberships.plans_router,
        memberships.subscriptions_router,
        inventory.router,
        stats.router,
    ):
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Map store errors onto HTTP responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation error", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(MissingReferenceError)
    @app.exception_handler(InsufficientStockError)
    async def business_rule_error(request: Request, exc: Exception):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc)},
        )

    @app.exception_handler(ConflictError)
    async def conflict_error(request: Request, exc: ConflictError):
        logger.warning("%s %s conflict: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An internal error occurred"},
        )


settings = get_settings()
configure_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "detailpro.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
