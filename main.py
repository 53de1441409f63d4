# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn

from app.api import routes_health, routes_customers
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.services.customer_store import ensure_data_file_exists

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app():
    app = FastAPI(title=settings.APP_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(routes_health.router)
    app.include_router(routes_customers.router)

    @app.on_event("startup")
    def on_startup():
        ensure_data_file_exists()
        logger.info(f"{settings.APP_NAME} running on port {settings.PORT}")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
