import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from config import Settings, get_settings
from adapters import OrderClient
from adapters.custom import StubOrderClient
from adapters.order_service import HttpOrderClient
from error_handlers import register_exception_handlers
from models import Base
from payment_service import PaymentService
from repository import PaymentRepository
from routers import payments

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("payment-service")


class EndpointFilter(logging.Filter):
    """Filter out noisy health check access logs."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - logging filter
        return "GET /health" not in record.getMessage()


logging.getLogger("uvicorn.access").addFilter(EndpointFilter())


def build_order_client(
    settings: Settings, http_client: httpx.AsyncClient
) -> OrderClient:
    if settings.order_service_api_url:
        return HttpOrderClient(settings.order_service_api_url, client=http_client)
    logger.warning("ORDER_SERVICE_API_URL not set; using stub order client")
    return StubOrderClient()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine: AsyncEngine = create_async_engine(settings.database_url)
        sessionmaker = async_sessionmaker(engine, expire_on_commit=False)

        # Ensure database is reachable before serving requests
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.create_schema:
                await conn.run_sync(Base.metadata.create_all)

        http_client = httpx.AsyncClient(timeout=settings.order_service_timeout)
        order_client = build_order_client(settings, http_client)
        app.state.payment_service = PaymentService(
            PaymentRepository(sessionmaker), order_client
        )
        logger.info("Payment routes mounted at %s", settings.api_base_path)
        try:
            yield
        finally:
            await order_client.close()
            await http_client.aclose()
            await engine.dispose()

    app = FastAPI(
        title="Payment Service",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(payments.router, prefix=settings.api_base_path)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": "payment-service"}

    return app


app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.HTTP_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
