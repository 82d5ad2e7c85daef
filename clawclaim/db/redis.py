from redis.asyncio import Redis

from config.settings import settings

_redis_client: Redis | None = None


async def get_redis(url: str | None = None) -> Redis:
    """Connection backing RedisStatusStore, opened on the first status read.

    Replies are decoded to str so the stored value compares directly with
    RunStatus members.
    """
    global _redis_client
    if _redis_client is None:
        _redis_client = Redis.from_url(url or settings.redis_url, decode_responses=True)
    return _redis_client


async def close_redis() -> None:
    """Called on every exit path of a run; a no-op for the file backend."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
