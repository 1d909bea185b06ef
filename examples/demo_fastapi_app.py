import json
import logging
import os
from pathlib import Path
import sys
import time

# Allow running this demo without installing the package:
#   python examples/demo_fastapi_app.py
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi import FastAPI, HTTPException, Response

from cache_bridge_redis import CacheConfig

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

app = FastAPI(title="cache-bridge-redis demo")

USER_TTL_MS = 30_000
LOCK_TTL_MS = 5_000


@app.on_event("startup")
async def _startup() -> None:
    # Examples:
    #   REDIS_URL=redis://:password@localhost:6379/0
    redis_url = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CacheConfig.from_url(redis_url)


@app.on_event("shutdown")
async def _shutdown() -> None:
    client = CacheConfig.get_client()
    await client.client.aclose()
    CacheConfig.reset()


@app.get("/users/{user_id}")
async def get_user(user_id: int) -> Response:
    cache = CacheConfig.get_client()
    cache_key = f"users:{user_id}"

    text = await cache.get(cache_key)
    if text is None:
        logger.info("Cache miss for user %s; loading from source", user_id)
        text = json.dumps({"user_id": user_id, "name": f"user-{user_id}", "ts": time.time()})
        await cache.set(cache_key, text, USER_TTL_MS)

    return Response(content=text, media_type="application/json")


@app.get("/users")
async def get_users(ids: str) -> dict:
    cache = CacheConfig.get_client()
    keys = [f"users:{user_id}" for user_id in ids.split(",") if user_id]
    pairs = await cache.get_many(keys)
    return {key: json.loads(text) if text is not None else None for key, text in pairs}


@app.post("/users/warm")
async def warm_users(count: int = 10) -> dict:
    cache = CacheConfig.get_client()
    entries = {
        f"users:{user_id}": json.dumps({"user_id": user_id, "name": f"user-{user_id}", "warmed": True})
        for user_id in range(1, count + 1)
    }
    await cache.set_many(entries, USER_TTL_MS)
    return {"warmed": len(entries)}


@app.post("/users/{user_id}/lock")
async def lock_user(user_id: int) -> dict:
    cache = CacheConfig.get_client()
    acquired = await cache.set_not_exist(f"locks:users:{user_id}", str(time.time()), LOCK_TTL_MS)
    if not acquired:
        raise HTTPException(status_code=409, detail=f"user {user_id} is locked")
    return {"locked": True, "user_id": user_id}


@app.delete("/users/{user_id}")
async def evict_user(user_id: int) -> dict:
    cache = CacheConfig.get_client()
    logger.info("Evicting cache for user %s", user_id)
    await cache.delete(f"users:{user_id}")
    return {"evicted": True, "user_id": user_id}


@app.delete("/users")
async def evict_users(ids: str) -> dict:
    cache = CacheConfig.get_client()
    keys = [f"users:{user_id}" for user_id in ids.split(",") if user_id]
    await cache.delete_many(keys)
    return {"evicted": len(keys)}


# Run:
#   1) docker run --rm -p 6379:6379 redis:7
#   2) uvicorn examples.demo_fastapi_app:app --reload


if __name__ == "__main__":
    try:
        import uvicorn
    except ImportError as e:
        raise SystemExit(
            "uvicorn is required to run the demo. Install with: pip install -e '.[examples]'"
        ) from e

    uvicorn.run(
        "examples.demo_fastapi_app:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
