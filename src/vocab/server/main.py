"""
Vocab API Server.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from vocab.core.cache import DictionaryCache
from vocab.core.errors import VocabError
from vocab.server.deps import get_redis, get_settings
from vocab.server.routes import cache, lookup, wordbook


logger = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        logger.info("  %-8s %-30s → %s", methods, path, name)


async def purge_periodically(cache: DictionaryCache, interval_s: float):
    """Sweep expired cache records forever. Failures are logged and retried next tick."""
    while True:
        await asyncio.sleep(interval_s)
        try:
            await asyncio.to_thread(cache.purge_expired)
        except VocabError as e:
            logger.warning("cache purge failed: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_routes(app)

    purge_task = None
    if settings.purge_interval_s > 0:
        purge_cache = DictionaryCache(get_redis(), prefix=settings.cache_prefix)
        purge_task = asyncio.create_task(purge_periodically(purge_cache, settings.purge_interval_s))

    yield

    if purge_task is not None:
        purge_task.cancel()
        try:
            await purge_task
        except asyncio.CancelledError:
            pass


app = FastAPI(title="Vocab API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(lookup.router)
app.include_router(wordbook.router)
app.include_router(cache.router)


@app.exception_handler(redis.RedisError)
async def redis_error_handler(request: Request, exc: redis.RedisError):
    logger.error("redis error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "storage unavailable"})


@app.get("/")
async def root():
    return {"name": "Vocab API", "version": "0.1.0"}


@app.get("/health")
async def health():
    return {"status": "ok"}
