import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise.contrib.fastapi import RegisterTortoise

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.api import health, presale_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: opens and closes the database connections."""
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not set")

    async with RegisterTortoise(
        app,
        config=settings.tortoise_config,
        generate_schemas=settings.generate_schemas,  # aerich owns migrations
        add_exception_handlers=False,
    ):
        logger.info("Database connections initialized")
        yield


app = FastAPI(
    title=settings.app_name,
    description="""
    Presale website API

    This API provides endpoints for:
    - Reading presale progress (amount raised, supply goal, stage end time)
    - Converting a payment in ETH, BNB, TRX, SOL or USDT into tokens
    - Recording purchases and listing them per wallet address
    """,
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(presale_router.router, prefix=settings.api_prefix)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
        "api": f"{settings.api_prefix}/presale",
    }
