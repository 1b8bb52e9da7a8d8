import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from order_tracker.config import get_settings
from order_tracker.exceptions import OrderTrackerError
from order_tracker.routers import auth, frontend, orders
from order_tracker.services.sheets_service import SheetsClient

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def order_tracker_error_handler(request: Request, exc: OrderTrackerError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(sheets_client=None) -> FastAPI:
    """
    Build the API. With no client given, the Sheets client is constructed from
    settings at startup; a StoreConfigurationError there aborts startup.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        # Startup: connect to the spreadsheet unless a client was injected
        if sheets_client is None:
            app.state.sheets = SheetsClient.from_settings(settings)
        logger.info("Using spreadsheet %s", settings.spreadsheet_id)
        yield

    app = FastAPI(
        title="Order Tracker",
        description="Order release and packing API backed by Google Sheets",
        version="1.0.0",
        lifespan=lifespan,
    )
    # Set eagerly so requests work without running the lifespan
    app.state.sheets = sheets_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(OrderTrackerError, order_tracker_error_handler)

    app.include_router(frontend.router, tags=["Frontend"])
    app.include_router(auth.router, tags=["Auth"])
    app.include_router(orders.router, prefix="/pedidos", tags=["Orders"])

    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app


app = create_app()


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
