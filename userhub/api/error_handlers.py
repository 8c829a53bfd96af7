"""
Userhub - Error Handlers
Global exception handlers mapping errors to HTTP responses
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from userhub.core.config import settings
from userhub.core.errors import UserhubError


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app"""

    @app.exception_handler(UserhubError)
    async def userhub_error_handler(request: Request, exc: UserhubError):
        """Tagged errors carry their own status"""
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Framework errors (401 from auth, unknown routes) use the same body shape"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are reported like any other validation failure"""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = [
            {
                "field": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed.", "details": details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.opt(exception=exc).error(f"❌ Unhandled exception on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.DEBUG else "An error occurred",
            },
        )
