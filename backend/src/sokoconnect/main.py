"""
SokoConnect Advisor — application FastAPI.

`create_app()` assemble l'API (logging au démarrage, CORS, handler
d'erreurs, routes). `app` est l'instance servie par uvicorn :

    uvicorn sokoconnect.main:app
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sokoconnect.api.routes import router
from sokoconnect.core.logger import setup_logging
from sokoconnect.core.settings import settings

logger = logging.getLogger("SokoConnect")


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    logger.info("SokoConnect Advisor v%s ready (currency=%s, multilingual=%s)",
                settings.APP_VERSION, settings.CURRENCY, settings.MULTILINGUAL_REPLIES)
    yield
    logger.info("SokoConnect Advisor shutting down.")


async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """Toute exception non prévue côté HTTP → 500 JSON, détail dans les logs."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"status": "error", "detail": "Internal server error."},
    )


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.APP_NAME,
        description="Conversational advisory engine for the SokoConnect marketplace",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.add_exception_handler(Exception, unhandled_error)
    application.include_router(router)
    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run("sokoconnect.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
