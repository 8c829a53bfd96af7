"""
Userhub - Main Application

FastAPI application with:
- JWT Bearer authentication
- RBAC (Admin → User)
- User management endpoints (list, get, update, delete)
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
import sys

from userhub.core.config import settings
from userhub.core.database import init_db, close_db
from userhub.api.error_handlers import register_error_handlers
from userhub.api.v1.router import api_router


def configure_logging() -> None:
    """Route all application logs through loguru sinks"""
    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.LOG_LEVEL,
    )

    if not settings.DEBUG:
        logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            level=settings.LOG_LEVEL,
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""

    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME}...")
    logger.info(f"📍 Environment: {settings.ENVIRONMENT}")
    logger.info(f"📍 Version: {settings.APP_VERSION}")

    try:
        logger.info("🔌 Connecting to database...")
        await init_db()
        logger.info("🎉 Application started successfully!")
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"⏹️  Shutting down {settings.APP_NAME}...")
    await close_db()
    logger.info("👋 Application stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="User management API",
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
        openapi_url="/api/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userhub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
