"""reportdesk API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ReportDeskError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and message producer initialized on startup via lifespan

Design Decisions:
    - Broker topology (exchange, queue, binding) declared once at startup;
      an unreachable broker at startup is logged, not fatal
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pika.exceptions import AMQPError

from reportdesk.api.error_handlers import register_error_handlers
from reportdesk.api.routes import health, reports
from reportdesk.config import get_settings
from reportdesk.infrastructure.database import init_db
from reportdesk.infrastructure.message_producer import init_producer
from reportdesk.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    producer = init_producer(settings.rabbitmq)
    try:
        producer.setup()
    except (AMQPError, OSError) as e:
        logger.error(f"RabbitMQ setup failed: {e}")
    logger.info("reportdesk API started")
    yield
    await manager.dispose()
    logger.info("reportdesk API shutting down")


app = FastAPI(
    title="reportdesk API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(reports.router)

register_error_handlers(app)
