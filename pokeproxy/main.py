# pokeproxy/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokeproxy.api.lookup import router as lookup_router
from pokeproxy.config import get_settings
from pokeproxy.upstream.client import build_async_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with build_async_client(get_settings()) as client:
        app.state.http_client = client
        yield


app = FastAPI(
    title="Pokémon lookup proxy",
    version="0.1.0",
    lifespan=lifespan,
)

# Every origin is allowed. Restrict to the frontend's origin before deploying.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
)


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    # CORSMiddleware only answers requests that carry an Origin header
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(lookup_router)


def run() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    logger.info("Listening on port %s", settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("Test endpoint: http://localhost:%s/lookup/pikachu", settings.port)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
