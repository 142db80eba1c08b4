"""
Person directory API entrypoint.

Run with uvicorn from `api/`:

    uvicorn main:app --reload

or `python main.py`, which reads HOST and PORT from the environment.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import config, db
from core.logging_config import setup_logging
from people import router as people_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    # Storage failures reach here unchanged from the service layer.
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error."})


def create_app() -> FastAPI:
    setup_logging(config.log_level())

    app = FastAPI(title="person-directory", lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, unhandled_error)

    app.include_router(people_router.router, tags=["people"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "person-directory api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.server_host(), port=config.server_port())
