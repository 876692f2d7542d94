import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .error import ClientError, ServerError

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


def create_app(ApplicationConfig, enable_sweeper: bool = True) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from taskhub.adapter.services.session_sweeper import SessionSweeper
        from taskhub.depends import AsyncSessionLocal

        sweeper = SessionSweeper(
            AsyncSessionLocal, ApplicationConfig.SESSION_PURGE_INTERVAL_SECONDS
        )
        if enable_sweeper:
            sweeper.start()
        try:
            yield
        finally:
            await sweeper.stop()

    app = FastAPI(title=ApplicationConfig.APP_NAME, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from taskhub.api.routes import auth, health_check, sessions

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(sessions.router, tags=["Sessions"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
