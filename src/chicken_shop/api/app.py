"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chicken_shop.api.calendar_notes import router as calendar_notes_router
from chicken_shop.api.customers import router as customers_router
from chicken_shop.api.dashboard import router as dashboard_router
from chicken_shop.api.employees import router as employees_router
from chicken_shop.api.orders import router as orders_router
from chicken_shop.api.parts import router as parts_router
from chicken_shop.api.wages import router as wages_router
from chicken_shop.app_logging import configure_logging
from chicken_shop.containers import AppContainer
from chicken_shop.domain.errors import PersistenceError, ShopError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Chicken Shop Manager")
    app.state.container = container

    for router in (
        customers_router,
        parts_router,
        orders_router,
        employees_router,
        wages_router,
        calendar_notes_router,
        dashboard_router,
    ):
        app.include_router(router)

    @app.exception_handler(ShopError)
    async def handle_shop_error(request: Request, exc: ShopError) -> JSONResponse:
        if isinstance(exc, PersistenceError):
            logger.error(
                "Store operation failed",
                extra={"path": request.url.path, "error": exc.message},
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
