import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.config import Settings, get_settings
from api.core.logging_setup import configure_logging
from api.routers import health as health_router
from api.routers import todos as todos_router
from api.services.todo_service import TodoService

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and elapsed time."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # corpo vazio/invalido ou id nao numerico: 400 em vez do 422 padrao
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    return JSONResponse({"ok": False, "error": "invalid_request", "message": message}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Todo API; compativel com ``uvicorn --factory``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Todo API")

    allowed_cors = settings.allowed_origins
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_cors,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(RequestValidationError, _validation_error)

    todo_service = TodoService()
    if settings.seed_todos:
        todo_service.seed()
    app.state.todo_service = todo_service
    app.state.settings = settings

    app.include_router(health_router.router)
    app.include_router(todos_router.router)

    logger.info("Todo API ready (env=%s)", settings.app_env)
    return app


app = create_app()
