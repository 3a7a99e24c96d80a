from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, Error, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    # Audit reads and compliance writes fail loudly, never as an empty 200
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return await handle_server_error(
        request, ServerError(Error(code="INTERNAL_ERROR", message="Internal server error"))
    )


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Admin Audit API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import audit, security

    app.include_router(security.router, prefix=ApplicationConfig.API_PREFIX, tags=["Security"])
    app.include_router(audit.router, prefix=ApplicationConfig.API_PREFIX, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
