import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.base_error.to_dict()
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import get_completion_worker, stats_notifier

    worker = get_completion_worker() if app.state.config.ENABLE_COMPLETION_WORKER else None
    task = None
    if worker is not None:
        task = asyncio.create_task(worker.start())

    yield

    if worker is not None:
        await worker.stop()
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    await stats_notifier.close()


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title="Project Marketplace API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        health_check,
        projects,
        applications,
        accounts,
        dead_letters,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(projects.router, tags=["Projects"])
    app.include_router(applications.router, tags=["Applications"])
    app.include_router(accounts.router, tags=["Accounts"])
    app.include_router(dead_letters.router, tags=["Dead Letters"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
