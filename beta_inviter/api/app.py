from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from .error import GENERIC_SERVER_MESSAGE, ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.to_dict()
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


def _format_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        # loc is ("body", "inviteCode") or ("query", "pageSize")
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return "; ".join(messages) or "Invalid request"


async def handle_validation_error(request: Request, exc: RequestValidationError):
    error_dict = {"code": "VALIDATION_ERROR", "message": _format_validation_error(exc)}
    logger.warning(f"Validation error: {error_dict}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    async def handle_server_error(request: Request, exc: ServerError):
        error_dict = exc.to_dict(
            expose_message=ApplicationConfig.ENVIRONMENT == "development"
        )
        logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
        return JSONResponse(
            status_code=exc.status_code, content={"error": error_dict}
        )

    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        message = (
            str(exc) if ApplicationConfig.ENVIRONMENT == "development" else GENERIC_SERVER_MESSAGE
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "DATABASE_ERROR", "message": message}},
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from beta_inviter.depends import engine
            import beta_inviter.domain.entities  # noqa: F401 registers tables

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="Beta Inviter API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} "
                f"{elapsed_ms:.1f}ms"
            )
            return response

    from beta_inviter.api.routes import (
        auth,
        dashboard,
        emails,
        health_check,
        invite_codes,
        waitlist,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(invite_codes.router, prefix=prefix, tags=["Invite Codes"])
    app.include_router(emails.router, prefix=prefix, tags=["Emails"])
    app.include_router(dashboard.router, prefix=prefix, tags=["Dashboard"])
    app.include_router(waitlist.router, prefix=prefix, tags=["Waitlist"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
